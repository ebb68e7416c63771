"""A text-mode boss-fight aggro simulation and a small 2D collision and cannon playground."""

__version__ = "0.1.0"