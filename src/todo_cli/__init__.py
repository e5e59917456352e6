"""Todo CLI - a local command-line task manager backed by a JSON file."""

__version__ = "1.7.0"
