"""brows - browse GitHub releases in the terminal."""

__version__ = "0.1.0"
