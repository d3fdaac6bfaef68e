"""Lenient parsers for the string fields of a receipt.

Each parser returns None instead of raising, so callers can treat an
unparsable field as "rule does not apply".
"""

from __future__ import annotations

import re
from datetime import date, time
from decimal import Decimal

_AMOUNT_RE = re.compile(r"(\d+)(?:\.(\d*))?|\.(\d+)", re.ASCII)
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def parse_amount(text: str) -> Decimal | None:
    """Parse a non-negative decimal amount such as ``"12.25"``.

    Signs, exponents, surrounding whitespace and NaN/Infinity are rejected.
    """
    if not _AMOUNT_RE.fullmatch(text):
        return None
    return Decimal(text)


def parse_cents(text: str) -> int | None:
    """Parse an amount into whole cents.

    Returns None if the amount does not parse or carries sub-cent precision.
    """
    match = _AMOUNT_RE.fullmatch(text)
    if not match:
        return None
    dollars, fraction, bare_fraction = match.groups()
    fraction = (fraction if bare_fraction is None else bare_fraction) or ""
    # Built from the digits directly so no Decimal context rounding applies.
    if fraction[2:].strip("0"):
        return None
    try:
        return int(dollars or "0") * 100 + int(fraction[:2].ljust(2, "0"))
    except ValueError:
        # Beyond the interpreter's int string-conversion limit.
        return None


def parse_purchase_date(text: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    match = _DATE_RE.fullmatch(text)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_purchase_time(text: str) -> time | None:
    """Parse a 24-hour ``HH:MM`` time (a single-digit hour is accepted)."""
    match = _TIME_RE.fullmatch(text)
    if not match:
        return None
    hour, minute = (int(part) for part in match.groups())
    try:
        return time(hour, minute)
    except ValueError:
        return None
