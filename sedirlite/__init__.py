"""In-memory key-value server with strings, lists, sets and sorted sets."""

__version__ = "0.1.0"
__all__ = ["commands", "database", "server", "structures"]