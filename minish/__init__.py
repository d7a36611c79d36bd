"""A minimal interactive command shell: line splitting, parsing and a read-run loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]