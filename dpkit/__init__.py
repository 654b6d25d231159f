"""Dynamic-programming solutions for stock prices, integer sequences and strings."""

__version__ = "0.1.0"
__all__ = ["stocks", "sequences", "subsequences", "text"]