"""Todo Chat - a natural-language todo list in your terminal."""

__version__ = "0.1.0"
