# opigpio

Async control of GPIO pins through the Linux sysfs interface, and a watcher
that reports each change of an input pin's value.

Pins are exported with the `gpio` command-line tool, which must be on `PATH`.
Values are read and written directly in the pin's value file,
`$GPIO_DIR/gpio<N>/value`, where `GPIO_DIR` is an environment variable naming
the sysfs GPIO directory, for example `/sys/class/gpio`. If `GPIO_DIR` is not
set, any operation that needs a path raises `GpioError`.

## Installation

```
pip install opigpio
```

## Pins

`opigpio.pin` provides `GpioPin`, `Direction` (`INPUT` / `OUTPUT`, spelled
`"in"` / `"out"`), `GpioError` and `gpio_dir()`.

```python
import asyncio
from opigpio.pin import GpioPin

async def main():
    led = await GpioPin.new_output(7, 0)   # gpio export 7 out, then write 0
    await led.write(1)

    button = await GpioPin.new_input(3)    # gpio export 3 in
    print(await button.read())

asyncio.run(main())
```

- `new_output(pin_number, default)` and `write(value)` accept only `0` or `1`;
  anything else raises `GpioError`.
- `read()` returns the integer stored in the value file; unreadable or
  non-numeric content raises `GpioError`.
- A failing `gpio` command, or a value file that cannot be read or written,
  raises `GpioError`.
- Pin numbers must be between 0 and 255, otherwise `ValueError` is raised.
- `value_path()` gives the pin's value file. It does not check that the pin is
  exported or that the file exists.

A `GpioPin` can also be built directly, e.g.
`GpioPin(3, Direction.INPUT, support_watch=True)`, without running `gpio`;
this is handy when the value files are provided some other way, such as in
tests. Output pins never support watching.

## Watching pins

Before an input pin can be watched, edge notification has to be turned on with
`enable_watch()` (it runs `gpio edge <N> both`). Calling it on an output pin
raises `GpioError`, and so does passing a pin without watch support to the
watcher.

```python
import asyncio
from opigpio.pin import GpioPin
from opigpio.watcher import GpioWatcher

async def main():
    button = await GpioPin.new_input(3)
    await button.enable_watch()

    def on_change(value):
        print("button is now", value)

    async with await GpioWatcher.create({button: on_change}):
        await asyncio.sleep(60)

asyncio.run(main())
```

`GpioWatcher.create()` takes a mapping from pins to notifiers. A notifier is
any callable taking the new value; it may be a plain function or a coroutine
function.

- Each notifier is called once at start-up with the pin's current value. If
  that read or call fails, `create()` raises `GpioError`.
- After that, each time a pin's value file is modified its notifier is called
  with `1` if the file contains a `1`, otherwise `0`.
- Read errors and exceptions from notifiers while watching are logged and
  do not stop the watcher.
- Leaving the `async with` block, or calling `close()`, stops the watcher.

File changes are detected with `watchdog`.

## What it does not do

There is no command-line tool; the package is used from Python code. It does
not configure pull-up/down resistors or pin modes beyond exporting pins as
input or output with the `gpio` tool.

## Running the tests

```
pip install "opigpio[test]"
pytest
```