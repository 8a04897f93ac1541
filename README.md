# gm65

A small driver for the GM65 barcode and QR code scanner module. It talks to the
module over any byte stream, such as a serial port object, and builds the
9-byte command frames the module understands.

## Installation

```
pip install gm65
```

The package has no runtime dependencies. It does not open serial ports itself;
you pass it an already opened stream (for example a pyserial `Serial` object,
installed separately).

## Usage

`gm65.scanner.GM65Scanner` wraps a stream object. The stream needs
`write(data)`, `read(size)` and an `in_waiting` count of bytes ready to read,
which is what a pyserial `Serial` object provides. The optional second
argument, `sleep`, is the callable used to wait between commands; it defaults
to `time.sleep`.

```python
import time
import serial  # any stream with write/read/in_waiting will do

from gm65.scanner import GM65Scanner
from gm65.protocol import WorkingMode, LightMode, AimMode

port = serial.Serial("/dev/ttyUSB0", 9600, timeout=0)
scanner = GM65Scanner(port)

scanner.init()                      # factory reset (waits 10 s), then serial output
scanner.set_working_mode(WorkingMode.COMMAND)
scanner.set_light_mode(LightMode.NORMAL)
scanner.set_aim_mode(AimMode.NORMAL)
scanner.set_silent_mode(1)
scanner.set_led_mode(1)

scanner.scan_once()
time.sleep(1)
print(scanner.get_info())
```

### Scanner methods

- `init()`: send the factory-reset frame, wait 10 seconds, then send the
  serial-output frame and wait 1 second.
- `enable_setting_code()` / `disable_setting_code()`: allow or stop
  configuration by scanning setting barcodes; each waits 1 second.
- `get_mode(address_high, address_low)`: clear waiting input, send a read
  frame, wait 1 second and return byte 4 of the reply.
- `get_response()`: return all waiting bytes; raises `ScannerError` if none.
- `clear_buffer()`: discard all waiting bytes.
- `scan_once()`: trigger one scan (only effective in command mode).
- `get_info()`: return the waiting bytes as text, one character per byte
  (an empty string if nothing is waiting).

### Modes

- Working mode (bits 0-1 of register 0x0000): `WorkingMode.MANUAL`,
  `COMMAND`, `CONTINUOUS`, `INDUCTION`.
- Light mode (bits 2-3): `LightMode.NONE`, `NORMAL`, `ALWAYS_ON`.
- Aim mode (bits 4-5): `AimMode.NONE`, `NORMAL`, `ALWAYS_ON`.
- Silent mode (bit 6) and LED mode (bit 7): `1` on, `0` off.
- Sleep mode (bit 7 of register 0x0007): only applies in manual mode; the
  module sleeps after 30 seconds idle.

Each mode setter reads the current register value with `get_mode` first and
only changes the bits that belong to that mode. If the module gives no reply,
or a reply shorter than five bytes, `ScannerError` is raised.

### Building frames yourself

`gm65.protocol` exposes `write_command`, `read_command` and `replace_bits`
for building command frames without a scanner attached, along with the fixed
frames `SET_DEFAULT`, `SET_SERIAL_OUTPUT`, `ENABLE_SETTING_CODE`,
`DISABLE_SETTING_CODE` and `SCAN_ONCE`.

```python
from gm65.protocol import write_command, read_command, replace_bits

write_command(0x00, 0x02, 0x01)  # the "scan once" frame
read_command(0x00, 0x00)         # read the mode register
replace_bits(0b1111_1111, 0b11, 2, 1)  # -> 0b1111_0111
```

Frames end in the fixed bytes `0xAB 0xCD`, which the module accepts in place
of a CRC.