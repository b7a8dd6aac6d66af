"""String and character helpers, a balanced string-keyed tree and a doubly linked string list."""

__version__ = "0.1.0"