"""A side-scrolling space shooter built on pygame."""

__version__ = "0.1.0"