"""Receipt workflows."""

from receipt_points.application.receipts.score import (
    ReceiptScoreRequest,
    ReceiptScoreResult,
    run_score_receipt_file,
)

__all__ = [
    "ReceiptScoreRequest",
    "ReceiptScoreResult",
    "run_score_receipt_file",
]
