import pytest

from pi_oled.commands import CommandCode, build_init_sequence, check_geometry, page_start

EXPECTED_128x64 = [
    0xAE,
    0xD5, 0x80,
    0xA8, 0x3F,
    0xD3, 0x00,
    0x40,
    0x8D, 0x14,
    0x20, 0x00,
    0x21, 0x00, 0x7F,
    0x22, 0x00, 0x07,
    0xA1,
    0xC8,
    0xDA, 0x12,
    0x81, 0x9F,
    0xD9, 0xF1,
    0xDB, 0x20,
    0xA4,
    0xA6,
    0x2E,
    0xAF,
]


def test_init_sequence_matches_datasheet_order():
    assert [int(b) for b in build_init_sequence()] == EXPECTED_128x64


def test_init_sequence_starts_off_and_ends_on():
    seq = build_init_sequence()
    assert seq[0] == CommandCode.DISPLAY_OFF
    assert seq[-1] == CommandCode.DISPLAY_ON


def test_address_windows_always_have_start_and_end():
    seq = [int(b) for b in build_init_sequence(32)]
    col = seq.index(CommandCode.SET_COLUMN_ADDR)
    page = seq.index(CommandCode.SET_PAGE_ADDR)
    assert seq[col + 1:col + 3] == [0x00, 0x7F]
    assert seq[page + 1:page + 3] == [0x00, 3]


def test_short_panel_uses_sequential_com_pins():
    seq = [int(b) for b in build_init_sequence(32)]
    assert seq[seq.index(CommandCode.SET_MULTIPLEX) + 1] == 0x1F
    assert seq[seq.index(CommandCode.SET_COM_PINS) + 1] == 0x02


@pytest.mark.parametrize("height", [0, 60, 72, 128])
def test_init_sequence_rejects_heights_the_ram_cannot_hold(height):
    with pytest.raises(ValueError):
        build_init_sequence(height)


@pytest.mark.parametrize(
    "width, height",
    [(0, 64), (129, 64), (200, 128), (128, 0), (128, 60), (128, 72)],
)
def test_check_geometry_rejects(width, height):
    with pytest.raises(ValueError):
        check_geometry(width, height)


def test_page_start_commands():
    assert page_start(0) == 0xB0
    assert page_start(7) == CommandCode.SET_PAGE_START_7
    with pytest.raises(ValueError):
        page_start(8)
