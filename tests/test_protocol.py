import pytest

from gm65.protocol import (
    AimMode,
    LightMode,
    WorkingMode,
    read_command,
    replace_bits,
    write_command,
)


def test_write_command_matches_scan_once_frame():
    assert write_command(0x00, 0x02, 0x01) == bytes(
        [0x7E, 0x00, 0x08, 0x01, 0x00, 0x02, 0x01, 0xAB, 0xCD]
    )


def test_write_command_matches_factory_reset_frame():
    assert write_command(0x00, 0xD9, 0x55) == bytes(
        [0x7E, 0x00, 0x08, 0x01, 0x00, 0xD9, 0x55, 0xAB, 0xCD]
    )


def test_read_command_frame():
    assert read_command(0x00, 0x07) == bytes(
        [0x7E, 0x00, 0x07, 0x01, 0x00, 0x07, 0x01, 0xAB, 0xCD]
    )


@pytest.mark.parametrize("frame", [write_command(1, 2, 3), read_command(4, 5)])
def test_frames_are_nine_bytes_with_fixed_header_and_trailer(frame):
    assert len(frame) == 9
    assert frame[:2] == b"\x7e\x00"
    assert frame[-2:] == b"\xab\xcd"


@pytest.mark.parametrize("current", [0x00, 0xFF, 0x5A, 0xA5])
@pytest.mark.parametrize("value", [0, 1, 2, 3])
@pytest.mark.parametrize("shift", [0, 2, 4])
def test_replace_bits_sets_field_and_keeps_others(current, value, shift):
    result = replace_bits(current, 0b11, shift, value)
    assert (result >> shift) & 0b11 == value
    assert result & ~(0b11 << shift) & 0xFF == current & ~(0b11 << shift) & 0xFF


def test_replace_bits_single_bit():
    assert replace_bits(0x00, 1, 6, 1) == 0x40
    assert replace_bits(0xFF, 1, 7, 0) == 0x7F


def test_replace_bits_truncates_to_byte():
    assert 0 <= replace_bits(0xFF, 1, 7, 3) <= 0xFF


def test_mode_enums_place_field_values_in_mode_register():
    assert replace_bits(0x00, 0b11, 0, int(WorkingMode.COMMAND)) == 0x01
    assert replace_bits(0x00, 0b11, 2, int(LightMode.ALWAYS_ON)) == 0x08
    assert replace_bits(0x00, 0b11, 4, int(AimMode.ALWAYS_ON)) == 0x20
    assert [m.value for m in WorkingMode] == [0, 1, 2, 3]


def test_mode_enum_in_write_command_frame():
    value = replace_bits(0x00, 0b11, 0, int(WorkingMode.COMMAND))
    assert write_command(0x00, 0x00, value) == bytes(
        [0x7E, 0x00, 0x08, 0x01, 0x00, 0x00, 0x01, 0xAB, 0xCD]
    )