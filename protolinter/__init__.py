"""Lint rules for Protocol Buffers definitions, the model they check, and rule selection."""

__version__ = "0.1.0"

__all__ = ["__version__"]