"""Receipt points: score purchase receipts and serve the results over HTTP."""

__version__ = "0.1.0"
