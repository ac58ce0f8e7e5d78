"""Content admin backend: posts, news articles and categories."""

__version__ = "0.1.0"
