"""Decision-tree prediction of student outcomes from semicolon-separated records."""

__version__ = "0.1.0"