# src/duke/__init__.py

"""Duke: a line-oriented task tracker for the terminal."""

__version__ = "0.3.0"
