"""In-memory storage of scored receipts.

Receipts are scored when they are stored, so a lookup only reads the saved
points. Records live for the lifetime of the process; nothing is persisted.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from receipt_points.domain.errors import ReceiptNotFoundError
from receipt_points.domain.points import calculate_points
from receipt_points.domain.receipt import Receipt
from receipt_points.runtime.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoreRecord:
    """A stored receipt together with its points."""

    receipt_id: str
    receipt: Receipt
    points: int


class ReceiptStore(Protocol):
    """Storage contract used by the receipt workflows."""

    def put(self, receipt: Receipt) -> str: ...

    def get(self, receipt_id: str) -> ScoreRecord: ...

    def get_points(self, receipt_id: str) -> int: ...

    def __len__(self) -> int: ...


def new_receipt_id() -> str:
    """Generate a random identifier in canonical UUID form."""
    return str(uuid.uuid4())


class InMemoryReceiptStore:
    """Lock-guarded dict of ScoreRecords keyed by receipt id.

    Both reads and writes take the same lock; records are written once and
    never modified afterwards.
    """

    def __init__(
        self,
        scorer: Callable[[Receipt], int] = calculate_points,
        id_factory: Callable[[], str] = new_receipt_id,
    ) -> None:
        self._scorer = scorer
        self._id_factory = id_factory
        self._records: dict[str, ScoreRecord] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        """Score and store a receipt, returning its new identifier."""
        points = self._scorer(receipt)

        with self._lock:
            receipt_id = self._id_factory()
            # uuid4 collisions are not expected; regenerate rather than overwrite.
            while receipt_id in self._records:
                logger.warning("Receipt id collision on %s, regenerating", receipt_id)
                receipt_id = self._id_factory()
            self._records[receipt_id] = ScoreRecord(receipt_id=receipt_id, receipt=receipt, points=points)

        logger.debug("Stored receipt %s (%d points)", receipt_id, points)
        return receipt_id

    def get(self, receipt_id: str) -> ScoreRecord:
        """Return the stored record for an identifier.

        Raises:
            ReceiptNotFoundError: If the identifier is unknown.
        """
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFoundError(receipt_id)
        return record

    def get_points(self, receipt_id: str) -> int:
        """Return the points for an identifier.

        Raises:
            ReceiptNotFoundError: If the identifier is unknown.
        """
        return self.get(receipt_id).points

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


# Global singleton instance
_store: InMemoryReceiptStore | None = None


def get_receipt_store() -> InMemoryReceiptStore:
    """Get or create the process-wide receipt store."""
    global _store
    if _store is None:
        _store = InMemoryReceiptStore()
    return _store


def reset_receipt_store() -> None:
    """Drop the process-wide store. Useful for testing."""
    global _store
    _store = None
