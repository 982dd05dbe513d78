"""Monostatic radar cross section by shooting and bouncing rays over a triangle hierarchy."""

__version__ = "0.1.0"