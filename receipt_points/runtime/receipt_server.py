"""FastAPI server for submitting receipts and reading their points."""

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from receipt_points.domain.errors import ReceiptNotFoundError
from receipt_points.runtime.logging import get_logger
from receipt_points.runtime.receipt_schema import (
    ErrorResponse,
    PointsResponse,
    ProcessReceiptResponse,
    ReceiptPayload,
)
from receipt_points.runtime.receipt_store import ReceiptStore, get_receipt_store

logger = get_logger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid."
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID."


async def _invalid_receipt_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Logged without the body; receipts may carry purchase details.
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse({"description": INVALID_RECEIPT_MESSAGE}, status_code=400)


async def _receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError) -> JSONResponse:
    logger.info("Points requested for unknown receipt %s", exc.receipt_id)
    return JSONResponse({"description": RECEIPT_NOT_FOUND_MESSAGE}, status_code=404)


async def read_receipt_payload(request: Request) -> ReceiptPayload:
    """Validate the raw request body as a receipt, whatever its Content-Type.

    Clients such as `curl -d` send JSON under a form content type, so the body
    is decoded here rather than by FastAPI's JSON-only body parsing.
    """
    body = await request.body()
    try:
        return ReceiptPayload.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Build the receipt API around a store.

    Args:
        store: Receipt store to use. If None, uses the process-wide store.
    """

    def provide_store() -> ReceiptStore:
        # Looked up per request so reset_receipt_store() is honoured.
        return store if store is not None else get_receipt_store()

    app = FastAPI(title="Receipt Points")
    app.add_exception_handler(RequestValidationError, _invalid_receipt_handler)
    app.add_exception_handler(ReceiptNotFoundError, _receipt_not_found_handler)

    # Plain `def` endpoints run on the worker thread pool, one request per thread.
    @app.post(
        "/receipts/process",
        response_model=ProcessReceiptResponse,
        responses={400: {"model": ErrorResponse}},
    )
    def process_receipt(
        payload: ReceiptPayload = Depends(read_receipt_payload),
        store: ReceiptStore = Depends(provide_store),
    ) -> ProcessReceiptResponse:
        """Store a receipt and return its new id."""
        receipt_id = store.put(payload.to_receipt())
        logger.info("Processed receipt %s", receipt_id)
        return ProcessReceiptResponse(id=receipt_id)

    @app.get(
        "/receipts/{receipt_id}/points",
        response_model=PointsResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def get_points(
        receipt_id: str,
        store: ReceiptStore = Depends(provide_store),
    ) -> PointsResponse:
        """Return the points awarded to a stored receipt."""
        return PointsResponse(points=store.get_points(receipt_id))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    from receipt_points.runtime.settings import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
