import pytest

from conftest import RecordingTransport
from pi_oled import oled_smoke
from pi_oled.display import Ssd1306Display


@pytest.fixture
def recorded(monkeypatch):
    transport = RecordingTransport()

    def fake_open_display(config):
        return Ssd1306Display(config.address, transport, width=config.width, height=config.height)

    monkeypatch.setattr(oled_smoke, "open_display", fake_open_display)
    monkeypatch.setattr(oled_smoke.time, "sleep", lambda s: None)
    return transport


def test_parse_args_accepts_hex_address():
    args = oled_smoke.parse_args(["--addr", "0x3D", "--bus", "0"])
    assert args.addr == 0x3D
    assert args.bus == 0


def test_main_draws_test_pixels_and_closes(recorded, capsys):
    assert oled_smoke.main(["--hold", "0"]) == 0

    assert recorded.calls[0] == ("address", 0x3C)
    assert recorded.commands()[-1] == 0xAE
    assert recorded.closed
    lit = recorded.frames()[-2]
    assert lit[1] == 0x01 and lit[2] == 0x02 and lit[3] == 0x04
    assert "OLED closed" in capsys.readouterr().out


def test_main_reports_transport_failure(monkeypatch, capsys):
    transport = RecordingTransport(fail_on="address")
    monkeypatch.setattr(oled_smoke, "open_display", lambda config: Ssd1306Display(config.address, transport))

    assert oled_smoke.main([]) == 1
    assert "SSD1306 OLED error" in capsys.readouterr().out
