"""Vending machine simulator driven by an extended finite state machine."""

__version__ = "0.1.0"