"""Advent of Code command-line client."""

__version__ = "0.12.2"
