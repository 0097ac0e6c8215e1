"""Hardware smoke test for a Pi-connected SSD1306 OLED.

Wiring: OLED SDA -> GPIO2 (pin 3), SCL -> GPIO3 (pin 5), enable I2C with
raspi-config first.

Run on Raspberry Pi:
  python -m pi_oled.oled_smoke
  python -m pi_oled.oled_smoke --bus 1 --addr 0x3C --flash --hold 5
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional

from pi_oled.display import OledConfig, open_display
from pi_oled.errors import DisplayError


# ==== USER CONFIG ====
I2C_BUS = 1
I2C_ADDR = 0x3C
WIDTH = 128
HEIGHT = 64
HOLD_S = 3.0
FLASH_DELAY_S = 0.5
TEST_PIXELS = ((0, 0), (1, 1), (2, 2))
# =====================


def parse_int(text: str) -> int:
    return int(text, 0)


def parse_args(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(description="SSD1306 OLED smoke test over Pi I2C")
    parser.add_argument("--bus", type=int, default=I2C_BUS, help="Pi I2C bus (usually 1)")
    parser.add_argument("--addr", type=parse_int, default=I2C_ADDR, help="OLED I2C address (e.g. 0x3C)")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--hold", type=float, default=HOLD_S, help="Seconds to keep pixels on screen")
    parser.add_argument("--flash", action="store_true", help="Flash the whole panel on/off before drawing")
    parser.add_argument("--verbose", action="store_true", help="Log every bus write")
    return parser.parse_args(argv)


def run(args) -> None:
    config = OledConfig(i2c_bus=args.bus, address=args.addr, width=args.width, height=args.height)
    oled = open_display(config)

    oled.initialize()
    print(f"OLED ready: bus={config.i2c_bus} addr=0x{config.address:02X} {config.width}x{config.height}")

    try:
        if args.flash:
            oled.fill(0xFF)
            time.sleep(FLASH_DELAY_S)
            oled.fill(0x00)
            time.sleep(FLASH_DELAY_S)

        print("Attempting to draw pixels")
        for x, y in TEST_PIXELS:
            oled.set_pixel(x, y)
            print(f"Pixel drawn at ({x}, {y})")
        print("End pixel attempt")

        time.sleep(args.hold)
    finally:
        oled.close()
        print("OLED closed")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        run(args)
    except DisplayError as exc:
        print(f"SSD1306 OLED error: {exc}")
        return 1
    except KeyboardInterrupt:
        print("Stopped.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
