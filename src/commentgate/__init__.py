"""commentgate - comment and docstring gate for automated code edits."""

__version__ = "0.1.0"
