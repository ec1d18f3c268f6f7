"""Hex board geometry and board view state for a Hive client."""

__version__ = "0.1.0"
