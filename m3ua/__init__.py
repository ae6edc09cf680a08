"""Encoding and decoding of M3UA messages, parameters and SS7 point codes."""

__version__ = "0.1.0"