"""Interactive command-line task list persisted to a local JSON file."""

__version__ = "0.1.0"
