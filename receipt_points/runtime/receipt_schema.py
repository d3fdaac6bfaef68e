"""Wire models for the receipt HTTP API.

Only the JSON shape is validated here: every field must be present and be a
string (or a list of items). Field contents are left to the scoring rules.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from receipt_points.domain.receipt import Receipt, ReceiptItem


class ItemPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(short_description=self.short_description, price=self.price)


class ReceiptPayload(BaseModel):
    """JSON body of ``POST /receipts/process``."""

    model_config = ConfigDict(populate_by_name=True)

    retailer: StrictStr
    purchase_date: StrictStr = Field(alias="purchaseDate")
    purchase_time: StrictStr = Field(alias="purchaseTime")
    items: list[ItemPayload]
    total: StrictStr

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(item.to_item() for item in self.items),
        )


class ProcessReceiptResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    description: str
