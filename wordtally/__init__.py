"""Count distinct words in text files and keep a running tally in a log."""

__version__ = "0.1.0"
__all__ = ["filesub", "lexer"]