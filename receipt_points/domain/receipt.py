"""Data models for submitted receipts."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReceiptItem:
    """A single line item on a receipt."""

    short_description: str
    # Kept as submitted; parsed only by the rules that need it.
    price: str


@dataclass(frozen=True)
class Receipt:
    """A submitted receipt.

    Every field holds the raw submitted string. Parsing is left to the scoring
    rules so that one malformed field cannot reject the whole receipt.
    """

    retailer: str
    purchase_date: str
    purchase_time: str
    total: str
    items: tuple[ReceiptItem, ...] = field(default_factory=tuple)
