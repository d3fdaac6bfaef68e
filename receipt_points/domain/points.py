"""Points calculation for submitted receipts.

Seven independent rules are evaluated and summed. A rule whose input field
does not parse contributes 0; it never aborts the calculation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import time
from decimal import Decimal, localcontext

from receipt_points.domain.parsing import (
    parse_amount,
    parse_cents,
    parse_purchase_date,
    parse_purchase_time,
)
from receipt_points.domain.receipt import Receipt

logger = logging.getLogger(f"receipt_points.{__name__}")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# Half-open window: 14:00 earns points, 16:00 does not.
AFTERNOON_WINDOW_START = time(14, 0)
AFTERNOON_WINDOW_END = time(16, 0)


@dataclass(frozen=True)
class PointsBreakdown:
    """Contribution of each rule to a receipt's points."""

    retailer: int = 0
    round_dollar: int = 0
    quarter_multiple: int = 0
    item_pairs: int = 0
    item_descriptions: int = 0
    odd_day: int = 0
    afternoon: int = 0

    @property
    def total(self) -> int:
        return (
            self.retailer
            + self.round_dollar
            + self.quarter_multiple
            + self.item_pairs
            + self.item_descriptions
            + self.odd_day
            + self.afternoon
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "retailer": self.retailer,
            "round_dollar": self.round_dollar,
            "quarter_multiple": self.quarter_multiple,
            "item_pairs": self.item_pairs,
            "item_descriptions": self.item_descriptions,
            "odd_day": self.odd_day,
            "afternoon": self.afternoon,
        }


def retailer_points(receipt: Receipt) -> int:
    """One point for every ASCII letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())


def round_dollar_points(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    cents = parse_cents(receipt.total)
    if cents is None:
        logger.debug("Unparsable total %r, skipping round-dollar rule", receipt.total)
        return 0
    return ROUND_DOLLAR_POINTS if cents % 100 == 0 else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    cents = parse_cents(receipt.total)
    if cents is None:
        logger.debug("Unparsable total %r, skipping quarter-multiple rule", receipt.total)
        return 0
    return QUARTER_MULTIPLE_POINTS if cents % 25 == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    """5 points for every two items on the receipt."""
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(receipt: Receipt) -> int:
    """Price-based points for items whose trimmed description length is a multiple of 3.

    An item earns ``ceil(price * 0.2)``. A description that is empty after
    trimming has length 0 and therefore qualifies. Items with an unparsable
    price earn nothing; the other items are still counted.
    """
    points = 0
    for index, item in enumerate(receipt.items):
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_MULTIPLE != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            logger.debug("Unparsable price %r on item %d, skipping", item.price, index)
            continue
        # Enough precision for the product to be exact before rounding up.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + 2)
            points += math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
    return points


def odd_day_points(receipt: Receipt) -> int:
    """6 points if the day in the purchase date is odd."""
    purchase_date = parse_purchase_date(receipt.purchase_date)
    if purchase_date is None:
        logger.debug("Unparsable purchase date %r, skipping odd-day rule", receipt.purchase_date)
        return 0
    return ODD_DAY_POINTS if purchase_date.day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    """10 points if the purchase time is from 14:00 up to, but not including, 16:00."""
    purchase_time = parse_purchase_time(receipt.purchase_time)
    if purchase_time is None:
        logger.debug("Unparsable purchase time %r, skipping afternoon rule", receipt.purchase_time)
        return 0
    if AFTERNOON_WINDOW_START <= purchase_time < AFTERNOON_WINDOW_END:
        return AFTERNOON_POINTS
    return 0


def score_receipt(receipt: Receipt) -> PointsBreakdown:
    """Apply every rule to a receipt and return the per-rule contributions."""
    return PointsBreakdown(
        retailer=retailer_points(receipt),
        round_dollar=round_dollar_points(receipt),
        quarter_multiple=quarter_multiple_points(receipt),
        item_pairs=item_pair_points(receipt),
        item_descriptions=item_description_points(receipt),
        odd_day=odd_day_points(receipt),
        afternoon=afternoon_points(receipt),
    )


def calculate_points(receipt: Receipt) -> int:
    """Return the total points for a receipt."""
    return score_receipt(receipt).total
