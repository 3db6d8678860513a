"""GPIO pins exported with the ``gpio`` command and driven through sysfs value files."""

from __future__ import annotations

import asyncio
import enum
import os
from dataclasses import dataclass
from pathlib import Path

GPIO_DIR_ENV = "GPIO_DIR"


class GpioError(Exception):
    """Raised when a GPIO operation fails."""


class Direction(str, enum.Enum):
    """Direction of a pin, spelled as the ``gpio`` command expects it."""

    INPUT = "in"
    OUTPUT = "out"


def gpio_dir() -> str:
    """Return the sysfs GPIO directory named by the ``GPIO_DIR`` environment variable."""
    try:
        return os.environ[GPIO_DIR_ENV]
    except KeyError:
        raise GpioError("GPIO_DIR environment variable not set") from None


def _check_level(value: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value not in (0, 1):
        raise GpioError(message)
    return value


async def _run_gpio(*args: str, action: str, failure: str) -> None:
    try:
        process = await asyncio.create_subprocess_exec(
            "gpio",
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate()
    except OSError as exc:
        raise GpioError(f"Failed to {action} the pin with gpio command") from exc
    if process.returncode != 0:
        raise GpioError(f"{failure}: {stderr.decode(errors='replace')}")


def _value_path(pin_number: int) -> str:
    return f"{gpio_dir()}/gpio{pin_number}/value"


@dataclass(eq=True)
class GpioPin:
    """A GPIO pin that is either an input or an output, never both.

    Use :meth:`new_input` or :meth:`new_output` so the pin gets exported.
    """

    pin_number: int
    direction: Direction
    support_watch: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.pin_number <= 255:
            raise ValueError(f"Pin number must be between 0 and 255, got {self.pin_number}")
        self.direction = Direction(self.direction)
        if self.direction is Direction.OUTPUT:
            self.support_watch = False

    def __hash__(self) -> int:
        return hash((self.direction, self.pin_number))

    @classmethod
    async def new_input(cls, pin_number: int) -> GpioPin:
        """Export ``pin_number`` as an input pin."""
        pin = cls(pin_number, Direction.INPUT)
        await _run_gpio(
            "export",
            str(pin_number),
            Direction.INPUT.value,
            action="export",
            failure="Failed to export the input pin",
        )
        return pin

    @classmethod
    async def new_output(cls, pin_number: int, default: int) -> GpioPin:
        """Export ``pin_number`` as an output pin and set it to ``default``."""
        _check_level(default, f"Default value must be 0 or 1, got {default}")
        pin = cls(pin_number, Direction.OUTPUT)
        await _run_gpio(
            "export",
            str(pin_number),
            Direction.OUTPUT.value,
            action="export",
            failure="Failed to export the output pin",
        )
        value_path = _value_path(pin_number)
        try:
            await asyncio.to_thread(Path(value_path).write_text, str(default))
        except OSError as exc:
            raise GpioError("Failed to set the pin default value") from exc
        return pin

    async def enable_watch(self) -> None:
        """Turn on edge notification for an input pin."""
        if self.direction is Direction.OUTPUT:
            raise GpioError("Edge notification is not supported for output pins")
        await _run_gpio(
            "edge",
            str(self.pin_number),
            "both",
            action="edge",
            failure="Failed to edge the input pin",
        )
        self.support_watch = True

    def value_path(self) -> str:
        """Path of the pin's value file; it need not exist."""
        return _value_path(self.pin_number)

    def supports_watch(self) -> bool:
        """Whether the pin's value file can be watched for changes."""
        return self.direction is Direction.INPUT and self.support_watch

    async def write(self, value: int) -> None:
        """Write 0 or 1 to the pin."""
        _check_level(value, "Value must be 0 or 1")
        try:
            await asyncio.to_thread(Path(self.value_path()).write_text, str(value))
        except OSError as exc:
            raise GpioError("Failed to write to the pin") from exc

    async def read(self) -> int:
        """Read the pin's current value."""
        try:
            content = await asyncio.to_thread(Path(self.value_path()).read_text)
        except OSError as exc:
            raise GpioError("Failed to read from the pin") from exc
        try:
            value = int(content.strip())
        except ValueError as exc:
            raise GpioError("Failed to parse the value from the pin") from exc
        if not 0 <= value <= 255:
            raise GpioError("Failed to parse the value from the pin")
        return value