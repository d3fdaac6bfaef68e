"""Shared pytest fixtures for receipt-points tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from receipt_points.domain.receipt import Receipt, ReceiptItem
from receipt_points.runtime.receipt_store import reset_receipt_store
from receipt_points.runtime.settings import reset_settings

TARGET_RECEIPT_JSON: dict[str, Any] = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT_JSON: dict[str, Any] = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def receipt_from_json(data: dict[str, Any]) -> Receipt:
    return Receipt(
        retailer=data["retailer"],
        purchase_date=data["purchaseDate"],
        purchase_time=data["purchaseTime"],
        total=data["total"],
        items=tuple(ReceiptItem(short_description=i["shortDescription"], price=i["price"]) for i in data["items"]),
    )


@pytest.fixture
def target_receipt() -> Receipt:
    return receipt_from_json(TARGET_RECEIPT_JSON)


@pytest.fixture
def corner_market_receipt() -> Receipt:
    return receipt_from_json(CORNER_MARKET_RECEIPT_JSON)


@pytest.fixture
def target_receipt_json() -> dict[str, Any]:
    return copy.deepcopy(TARGET_RECEIPT_JSON)


@pytest.fixture
def corner_market_receipt_json() -> dict[str, Any]:
    return copy.deepcopy(CORNER_MARKET_RECEIPT_JSON)


@pytest.fixture(autouse=True)
def _reset_singletons():
    reset_receipt_store()
    reset_settings()
    yield
    reset_receipt_store()
    reset_settings()
