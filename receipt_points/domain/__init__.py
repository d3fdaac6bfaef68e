"""Core domain models and scoring for receipt points.

This package provides:
- Receipt, ReceiptItem: submitted receipt models
- PointsBreakdown, score_receipt, calculate_points: the scoring engine
- ReceiptNotFoundError: lookup failure for unknown receipt ids

Usage:
    from receipt_points.domain import Receipt, ReceiptItem, calculate_points
"""

from receipt_points.domain.errors import ReceiptNotFoundError
from receipt_points.domain.points import PointsBreakdown, calculate_points, score_receipt
from receipt_points.domain.receipt import Receipt, ReceiptItem

__all__ = [
    "Receipt",
    "ReceiptItem",
    "PointsBreakdown",
    "calculate_points",
    "score_receipt",
    "ReceiptNotFoundError",
]
