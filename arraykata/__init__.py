"""Classic array and number exercises: statistics, arrangements, sorting and digit puzzles."""

__version__ = "0.1.0"

__all__ = ["arrange", "cli", "numbers", "sorting", "stats"]