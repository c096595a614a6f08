"""Film API: catalog service for characters, movies and franchises."""

__version__ = "1.0.0"
