"""Status messages, rust-analyzer project files and Python lessons for Rust exercises."""

__version__ = "5.4.1"