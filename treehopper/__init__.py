"""Toy private set intersection protocols built from message-passing nodes."""

__version__ = "0.1.0"
__all__ = ["challenge", "simple"]