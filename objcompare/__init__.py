"""objcompare - side-by-side comparison of the top-level properties of two objects."""

__version__ = "0.1.0"
