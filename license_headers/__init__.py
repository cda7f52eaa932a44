"""License header checking for source trees."""

__version__ = "0.1.0"
