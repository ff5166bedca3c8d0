"""Asset indicators from price tables and genetic-algorithm search for portfolio weights."""

__version__ = "0.1.0"