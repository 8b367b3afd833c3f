"""Access-controlled ballot registry and voting tally service."""

__version__ = "0.1.0"
