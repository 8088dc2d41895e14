"""Local workspace resolver — find and link local Maven projects."""

__version__ = "0.1.0"
