"""Domain errors shared by the store, workflows and server."""


class ReceiptNotFoundError(LookupError):
    """Raised when no receipt is stored under the requested identifier."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(f"No receipt found for id {receipt_id!r}")
        self.receipt_id = receipt_id
