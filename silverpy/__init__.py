"""Lexical front end for the Silver language."""

__version__ = "0.1.0"
