"""Offline receipt scoring workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from receipt_points.domain.points import PointsBreakdown, score_receipt
from receipt_points.runtime.logging import get_logger
from receipt_points.runtime.receipt_schema import ReceiptPayload

logger = get_logger(__name__)

ScoreStatus = Literal[
    "file_not_found",
    "unreadable_file",
    "invalid_receipt",
    "scored",
]


@dataclass(frozen=True)
class ReceiptScoreRequest:
    """Inputs for scoring one receipt JSON file."""

    receipt_path: Path


@dataclass(frozen=True)
class ReceiptScoreResult:
    """Outcome from scoring one receipt JSON file."""

    status: ScoreStatus
    breakdown: PointsBreakdown | None = None
    error: str | None = None

    @property
    def points(self) -> int | None:
        return self.breakdown.total if self.breakdown is not None else None


def run_score_receipt_file(request: ReceiptScoreRequest) -> ReceiptScoreResult:
    """Run score flow: read JSON -> validate shape -> score."""
    if not request.receipt_path.is_file():
        return ReceiptScoreResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.receipt_path}",
        )

    try:
        raw = request.receipt_path.read_bytes()
    except OSError as exc:
        logger.debug("Could not read %s: %s", request.receipt_path, exc)
        return ReceiptScoreResult(
            status="unreadable_file",
            error=f"Could not read receipt file {request.receipt_path}: {exc}",
        )

    try:
        payload = ReceiptPayload.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("Validation errors for %s: %s", request.receipt_path, exc.errors())
        return ReceiptScoreResult(
            status="invalid_receipt",
            error=f"Invalid receipt in {request.receipt_path}: {exc.error_count()} validation error(s)",
        )

    breakdown = score_receipt(payload.to_receipt())
    logger.debug("Scored %s: %s", request.receipt_path, breakdown.as_dict())
    return ReceiptScoreResult(status="scored", breakdown=breakdown)
