"""ZeroBudget: zero-based budgeting API."""

__version__ = "0.1.0"
