"""tasktrack: an in-memory task tracker with an interactive console menu."""

__version__ = "0.1.0"
