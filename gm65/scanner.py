"""Driver for the GM65 barcode scanner over a byte stream."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from gm65.protocol import (
    DISABLE_SETTING_CODE,
    ENABLE_SETTING_CODE,
    FLAG_REGISTER,
    RESPONSE_VALUE_INDEX,
    SCAN_ONCE,
    SET_DEFAULT,
    SET_SERIAL_OUTPUT,
    SLEEP_REGISTER,
    read_command,
    replace_bits,
    write_command,
)

RESET_DELAY = 10.0
COMMAND_DELAY = 1.0


class Stream(Protocol):
    """The serial-like interface the scanner talks through."""

    @property
    def in_waiting(self) -> int: ...

    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> object: ...


class ScannerError(Exception):
    """Raised when the scanner does not answer as expected."""


class GM65Scanner:
    """Configures and reads a GM65 module attached to ``stream``."""

    def __init__(self, stream: Stream, sleep: Callable[[float], object] = time.sleep):
        self.stream = stream
        self._sleep = sleep

    def _drain(self) -> bytes:
        chunks = []
        while self.stream.in_waiting > 0:
            chunks.append(self.stream.read(self.stream.in_waiting))
        return b"".join(chunks)

    def init(self) -> None:
        """Restore factory settings and enable serial output."""
        self.stream.write(SET_DEFAULT)
        self._sleep(RESET_DELAY)
        self.stream.write(SET_SERIAL_OUTPUT)
        self._sleep(COMMAND_DELAY)

    def enable_setting_code(self) -> None:
        """Allow configuring the module by scanning setting barcodes."""
        self.stream.write(ENABLE_SETTING_CODE)
        self._sleep(COMMAND_DELAY)

    def disable_setting_code(self) -> None:
        """Stop the module from reacting to setting barcodes."""
        self.stream.write(DISABLE_SETTING_CODE)
        self._sleep(COMMAND_DELAY)

    def get_response(self) -> bytes:
        """Return every byte waiting on the stream."""
        data = self._drain()
        if not data:
            raise ScannerError("no response from scanner")
        return data

    def clear_buffer(self) -> None:
        """Discard every byte waiting on the stream."""
        self._drain()

    def get_mode(self, address_high: int, address_low: int) -> int:
        """Read one register byte from the module."""
        self.clear_buffer()
        self.stream.write(read_command(address_high, address_low))
        self._sleep(COMMAND_DELAY)
        response = self.get_response()
        if len(response) <= RESPONSE_VALUE_INDEX:
            raise ScannerError(f"response too short: {response.hex()}")
        return response[RESPONSE_VALUE_INDEX]

    def _update_register(self, register: tuple[int, int], mask: int, shift: int, value: int) -> None:
        current = self.get_mode(*register)
        self.stream.write(write_command(*register, replace_bits(current, mask, shift, value)))

    def set_silent_mode(self, silent_mode: int) -> None:
        """Turn silent mode on (1) or off (0); bit 6 of the flag register."""
        self._update_register(FLAG_REGISTER, 0b1, 6, silent_mode)

    def set_led_mode(self, led_mode: int) -> None:
        """Turn the success LED on (1) or off (0); bit 7 of the flag register."""
        self._update_register(FLAG_REGISTER, 0b1, 7, led_mode)

    def set_working_mode(self, working_mode: int) -> None:
        """Set the trigger mode; bits 0-1 of the flag register."""
        self._update_register(FLAG_REGISTER, 0b11, 0, working_mode)

    def set_light_mode(self, light_mode: int) -> None:
        """Set the illumination mode; bits 2-3 of the flag register."""
        self._update_register(FLAG_REGISTER, 0b11, 2, light_mode)

    def set_aim_mode(self, aim_mode: int) -> None:
        """Set the aiming light mode; bits 4-5 of the flag register."""
        self._update_register(FLAG_REGISTER, 0b11, 4, aim_mode)

    def scan_once(self) -> None:
        """Trigger a single scan; only effective in command mode."""
        self.stream.write(SCAN_ONCE)

    def set_sleep_mode(self, sleep_mode: int) -> None:
        """Turn automatic sleep on (1) or off (0); bit 7 of register 0x0007."""
        self._update_register(SLEEP_REGISTER, 0b1, 7, sleep_mode)

    def get_info(self) -> str:
        """Return the waiting bytes as text, one character per byte."""
        return self._drain().decode("latin-1")