"""Game rules, SQLite storage and raw HTTP message handling for a number guessing game."""

__version__ = "0.1.0"