"""Loading, compiling, running and tracking Rust exercises, with terminal output helpers."""

__version__ = "4.6.0"