"""In-memory to-do list manager driven by a numbered console menu."""

__version__ = "0.1.0"
