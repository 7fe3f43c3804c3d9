"""In-memory train ticketing: seat allocation, receipts and passenger management."""

__version__ = "0.1.0"

__all__ = ["constants", "models", "validation", "service", "handler"]