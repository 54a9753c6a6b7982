"""Endless side-scrolling runner built on pygame + PyOpenGL."""

__version__ = "0.1.0"
