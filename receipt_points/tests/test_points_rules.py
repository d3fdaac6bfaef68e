"""Tests for the receipt scoring rules."""

from __future__ import annotations

from dataclasses import replace

import pytest

from receipt_points.domain.points import (
    PointsBreakdown,
    afternoon_points,
    calculate_points,
    item_description_points,
    item_pair_points,
    odd_day_points,
    quarter_multiple_points,
    retailer_points,
    round_dollar_points,
    score_receipt,
)
from receipt_points.domain.receipt import Receipt, ReceiptItem

_BASE = Receipt(
    retailer="",
    purchase_date="2022-01-02",
    purchase_time="10:00",
    total="1.01",
    items=(),
)


def _receipt(**changes) -> Receipt:
    return replace(_BASE, **changes)


def _items(*pairs: tuple[str, str]) -> tuple[ReceiptItem, ...]:
    return tuple(ReceiptItem(short_description=d, price=p) for d, p in pairs)


def test_base_receipt_scores_nothing() -> None:
    assert score_receipt(_BASE) == PointsBreakdown()
    assert calculate_points(_BASE) == 0


@pytest.mark.parametrize(
    ("retailer", "expected"),
    [
        ("Target", 6),
        ("M&M Corner Market", 14),
        ("  7-Eleven #42 ", 9),
        ("Café", 3),
        ("", 0),
    ],
)
def test_retailer_counts_ascii_alphanumerics(retailer: str, expected: int) -> None:
    assert retailer_points(_receipt(retailer=retailer)) == expected


@pytest.mark.parametrize(
    ("total", "round_dollar", "quarter"),
    [
        ("35.00", 50, 25),
        ("35", 50, 25),
        ("35.35", 0, 0),
        ("35.25", 0, 25),
        ("35.50", 0, 25),
        ("0.75", 0, 25),
        ("0.00", 50, 25),
        ("35.001", 0, 0),
    ],
)
def test_total_rules_use_exact_cents(total: str, round_dollar: int, quarter: int) -> None:
    receipt = _receipt(total=total)
    assert round_dollar_points(receipt) == round_dollar
    assert quarter_multiple_points(receipt) == quarter


@pytest.mark.parametrize("total", ["", "abc", "-5.00", "1e2", " 5.00", "NaN", "Infinity", "5,00"])
def test_unparsable_total_contributes_nothing(total: str) -> None:
    receipt = _receipt(total=total)
    assert round_dollar_points(receipt) == 0
    assert quarter_multiple_points(receipt) == 0


@pytest.mark.parametrize(("count", "expected"), [(0, 0), (1, 0), (2, 5), (4, 10), (5, 10)])
def test_item_pairs(count: int, expected: int) -> None:
    items = _items(*[("x", "1.00")] * count)
    assert item_pair_points(_receipt(items=items)) == expected


def test_description_length_multiple_of_three_earns_fifth_of_price_rounded_up() -> None:
    items = _items(
        ("Emils Cheese Pizza", "12.25"),  # 18 chars -> ceil(2.45) = 3
        ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00"),  # 24 chars trimmed -> ceil(2.4) = 3
        ("Mountain Dew 12PK", "6.49"),  # 17 chars, no points
    )
    assert item_description_points(_receipt(items=items)) == 6


def test_description_price_exactly_divisible_is_not_rounded_up() -> None:
    assert item_description_points(_receipt(items=_items(("abc", "5.00")))) == 1


def test_long_totals_keep_sub_cent_digits() -> None:
    receipt = _receipt(total="100000000000000000000000000.001")
    assert round_dollar_points(receipt) == 0
    assert quarter_multiple_points(receipt) == 0


def test_long_price_is_rounded_up_exactly() -> None:
    items = _items(("abc", "5" + "0" * 27 + ".01"))
    assert item_description_points(_receipt(items=items)) == 10**27 + 1


def test_empty_trimmed_description_counts_as_multiple_of_three() -> None:
    items = _items(("", "10.00"), ("    ", "1.00"))
    assert item_description_points(_receipt(items=items)) == 2 + 1


def test_unparsable_price_only_skips_that_item() -> None:
    items = _items(("abc", "not-a-price"), ("def", "-4.00"), ("ghi", "4.00"))
    receipt = _receipt(items=items)
    assert item_description_points(receipt) == 1
    assert item_pair_points(receipt) == 5


@pytest.mark.parametrize(
    ("purchase_date", "expected"),
    [
        ("2022-01-01", 6),
        ("2022-01-31", 6),
        ("2022-01-02", 0),
        ("2022-03-20", 0),
        ("2022-02-30", 0),
        ("2022-1-01", 0),
        ("01/01/2022", 0),
        ("", 0),
    ],
)
def test_odd_day(purchase_date: str, expected: int) -> None:
    assert odd_day_points(_receipt(purchase_date=purchase_date)) == expected


@pytest.mark.parametrize(
    ("purchase_time", "expected"),
    [
        ("13:59", 0),
        ("14:00", 10),
        ("14:33", 10),
        ("15:59", 10),
        ("16:00", 0),
        ("02:30", 0),
        ("24:00", 0),
        ("14:60", 0),
        ("14:00:00", 0),
        ("2pm", 0),
    ],
)
def test_afternoon_window_is_half_open(purchase_time: str, expected: int) -> None:
    assert afternoon_points(_receipt(purchase_time=purchase_time)) == expected


def test_target_receipt_breakdown(target_receipt: Receipt) -> None:
    breakdown = score_receipt(target_receipt)

    assert breakdown == PointsBreakdown(
        retailer=6,
        round_dollar=0,
        quarter_multiple=0,
        item_pairs=10,
        item_descriptions=6,
        odd_day=6,
        afternoon=0,
    )
    assert breakdown.total == 28
    assert calculate_points(target_receipt) == 28


def test_corner_market_receipt_total(corner_market_receipt: Receipt) -> None:
    breakdown = score_receipt(corner_market_receipt)

    assert breakdown.as_dict() == {
        "retailer": 14,
        "round_dollar": 50,
        "quarter_multiple": 25,
        "item_pairs": 10,
        "item_descriptions": 0,
        "odd_day": 0,
        "afternoon": 10,
    }
    assert calculate_points(corner_market_receipt) == 109


def test_malformed_fields_do_not_abort_scoring(target_receipt: Receipt) -> None:
    broken = replace(target_receipt, purchase_date="yesterday", purchase_time="noon", total="lots")

    breakdown = score_receipt(broken)

    assert breakdown.odd_day == 0
    assert breakdown.afternoon == 0
    assert breakdown.round_dollar == 0
    assert breakdown.quarter_multiple == 0
    assert breakdown.total == 6 + 10 + 6


def test_scoring_is_deterministic(target_receipt: Receipt) -> None:
    assert {calculate_points(target_receipt) for _ in range(5)} == {28}
