"""Community tech event overview: lifecycle status, filtering and storage."""

__version__ = "1.0.0"
