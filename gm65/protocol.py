"""Command frames and register helpers for the GM65 barcode scanner module."""

from __future__ import annotations

from enum import IntEnum

HEADER = bytes((0x7E, 0x00))
WRITE_TYPE = 0x08
READ_TYPE = 0x07
DATA_LENGTH = 0x01
# The module accepts this fixed trailer in place of a real CRC.
CRC_PLACEHOLDER = bytes((0xAB, 0xCD))

FLAG_REGISTER = (0x00, 0x00)
SCAN_TRIGGER_REGISTER = (0x00, 0x02)
SETTING_CODE_REGISTER = (0x00, 0x03)
SLEEP_REGISTER = (0x00, 0x07)
SERIAL_OUTPUT_REGISTER = (0x00, 0x0D)
FACTORY_RESET_REGISTER = (0x00, 0xD9)

RESPONSE_VALUE_INDEX = 4


class WorkingMode(IntEnum):
    """Scanning trigger mode, stored in bits 0-1 of the flag register."""

    MANUAL = 0
    COMMAND = 1
    CONTINUOUS = 2
    INDUCTION = 3


class LightMode(IntEnum):
    """Illumination mode, stored in bits 2-3 of the flag register."""

    NONE = 0
    NORMAL = 1
    ALWAYS_ON = 2


class AimMode(IntEnum):
    """Aiming light mode, stored in bits 4-5 of the flag register."""

    NONE = 0
    NORMAL = 1
    ALWAYS_ON = 2


def _frame(kind: int, address_high: int, address_low: int, value: int) -> bytes:
    return (
        HEADER
        + bytes((kind, DATA_LENGTH, address_high & 0xFF, address_low & 0xFF, value & 0xFF))
        + CRC_PLACEHOLDER
    )


def write_command(address_high: int, address_low: int, value: int) -> bytes:
    """Build the frame that writes one byte to a register."""
    return _frame(WRITE_TYPE, address_high, address_low, value)


def read_command(address_high: int, address_low: int) -> bytes:
    """Build the frame that reads one byte from a register."""
    return _frame(READ_TYPE, address_high, address_low, 0x01)


def replace_bits(current: int, mask: int, shift: int, value: int) -> int:
    """Clear the field ``mask << shift`` in ``current`` and add ``value`` into it.

    The result is truncated to a single byte.
    """
    cleared = current & ~(mask << shift)
    return (cleared + (value << shift)) & 0xFF


SET_DEFAULT = write_command(*FACTORY_RESET_REGISTER, 0x55)
SET_SERIAL_OUTPUT = write_command(*SERIAL_OUTPUT_REGISTER, 0x00)
ENABLE_SETTING_CODE = write_command(*SETTING_CODE_REGISTER, 0x01)
DISABLE_SETTING_CODE = write_command(*SETTING_CODE_REGISTER, 0x03)
SCAN_ONCE = write_command(*SCAN_TRIGGER_REGISTER, 0x01)