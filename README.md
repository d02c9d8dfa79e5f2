# bbsysfs

Small Python classes for driving BeagleBone peripherals through the Linux
sysfs interface: on-board user LEDs, GPIO pins, PWM channels and the ADC.

Every class takes a `root` directory, so the same code can run against the
real `/sys` tree on the board or against a directory of plain files in tests.
The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module            | Contents                                          |
|-------------------|---------------------------------------------------|
| `bbsysfs.sysfs`   | `read_value`, `write_value`                       |
| `bbsysfs.analog`  | `AnalogIn`                                        |
| `bbsysfs.led`     | `LED`                                             |
| `bbsysfs.pwm`     | `PWM`, `Polarity`, `frequency_to_period_ns`, `period_ns_to_frequency` |
| `bbsysfs.gpio`    | `GPIO`, `Direction`, `Value`, `Edge`              |

## Usage

### LEDs

`LED(number)` works on `/sys/class/leds/beaglebone:green:usr<number>`.
Each action prints a short message such as `Turning LED3 on.`.

```python
from bbsysfs.led import LED

led = LED(3)
led.turn_on()                 # removes the trigger, sets brightness to 1
led.flash(100)                # timer trigger, 100 ms on / 100 ms off (default "50")
lines = led.output_state()    # prints the trigger file and returns its lines
led.turn_off()
```

### Analog input

`AnalogIn(number)` reads `in_voltage<number>_raw` under
`/sys/bus/iio/devices/iio:device0`. Negative channel numbers raise
`ValueError`, as does a sample file with no integer in it.

```python
from bbsysfs.analog import AnalogIn

adc = AnalogIn(0)
print(adc.read_sample())
adc.number = 1                # switch channel
```

### PWM

`PWM(pin_name)` works on `/sys/class/pwm/<pin_name>/` and its `period`,
`duty_cycle`, `polarity` and `enable` attributes.

```python
from bbsysfs.pwm import PWM, Polarity

pwm = PWM("pwm-1:0")
pwm.period = 1_000_000            # nanoseconds
pwm.frequency = 1000.0            # or set it as a frequency in hertz
pwm.set_duty_percent(25.0)        # 0 to 100, else ValueError
pwm.run()
print(pwm.frequency, pwm.duty_cycle, pwm.duty_percent, pwm.is_running)

pwm.invert_polarity()
pwm.calibrate_analog_max(3.3)     # 3.2 to 3.4 V, else ValueError
pwm.analog_write(1.65)            # 0 to 3.3 V; sets frequency, polarity, duty, then runs
pwm.stop()
```

`analog_write` uses `pwm.analog_frequency` (100 kHz by default) and
`pwm.analog_max` (3.3 V by default).

Note on polarity: setting writes the enum's number (`ACTIVE_HIGH` is 0,
`ACTIVE_LOW` is 1), while reading treats a stored `0` as `ACTIVE_LOW` and
anything else as `ACTIVE_HIGH`. `invert_polarity` goes by what it reads.

The helpers `frequency_to_period_ns` and `period_ns_to_frequency` convert
between the two units and raise `ValueError` for values that are not
positive.

### GPIO

`GPIO(number)` works on `/sys/class/gpio/gpio<number>/`. The constructor
waits `settle_time` seconds (0.25 by default); pass `settle_time=0` to skip
the wait.

```python
from bbsysfs.gpio import GPIO, Direction, Value, Edge

pin = GPIO(60)
pin.direction = Direction.OUTPUT
pin.value = Value.HIGH
pin.toggle_output()               # invert the level once
pin.set_active_low()              # or pin.set_active_high()

pin.start_toggle(period_ms=200, times=10)   # background thread, 10 level writes
pin.change_toggle_time(100)
pin.toggle_cancel()

pin.stream_open()                 # keep the value file open for fast writes
pin.stream_write(Value.LOW)
pin.stream_close()

button = GPIO(46)
button.edge_type = Edge.RISING
button.wait_for_edge()            # makes the pin an input, blocks until an edge
button.debounce_time = 50         # ms between callbacks
button.wait_for_edge_async(lambda error: print("edge", error))
button.wait_for_edge_cancel()
```

`start_toggle` and `wait_for_edge_async` return the started daemon thread.
The callback gets `None` after an edge, or the `OSError` that ended the
wait. Edge detection uses `select.epoll` and so works on Linux only; where
epoll is missing, `wait_for_edge` raises `OSError`.

### Low-level helpers

```python
from bbsysfs.sysfs import read_value, write_value

write_value("/sys/class/pwm/pwm-1:0/", "enable", 1)
print(read_value("/sys/class/pwm/pwm-1:0/", "enable"))   # first line, no newline
```

## Errors

Failures to open a sysfs file are raised as `OSError`, and out-of-range
arguments as `ValueError`. Writing to a GPIO stream that is not open
raises `ValueError`.

## What the package does not do

- It has no command-line tool; it is a library only.
- It does not export or unexport GPIO pins; the pin's directory must
  already exist.
- It does not load device-tree overlays or configure pin multiplexing.