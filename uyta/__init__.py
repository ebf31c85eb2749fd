"""Уйта: a small island farming game built on pygame."""

__version__ = "0.1.0"