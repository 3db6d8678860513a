"""Async GPIO pin control over sysfs and watching of pin value changes."""

__version__ = "1.0.0"
__all__ = ["pin", "watcher"]