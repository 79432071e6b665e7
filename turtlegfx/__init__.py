"""Turtle-graphics language: syntax tree, interpreter, printer and viewer."""

__version__ = "0.1.0"

__all__ = ["ast", "interpreter", "printer", "viewer"]