"""Search X news stories and posts from the command line."""

__version__ = "1.0.0"
