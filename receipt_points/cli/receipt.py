"""Receipt command handlers used by the unified CLI."""

import argparse
import sys
from pathlib import Path

from receipt_points.runtime import get_logger

logger = get_logger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server for receipt submissions."""
    import uvicorn

    from receipt_points.runtime import receipt_server as server

    print(f"Starting receipt points server on {args.host}:{args.port}")
    print(f"Endpoints: POST http://{args.host}:{args.port}/receipts/process | GET /receipts/{{id}}/points")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)


def cmd_score(args: argparse.Namespace) -> None:
    """Score a receipt JSON file without starting the server."""
    from receipt_points.application.receipts.score import ReceiptScoreRequest, run_score_receipt_file

    result = run_score_receipt_file(ReceiptScoreRequest(receipt_path=Path(args.receipt)))

    if result.status != "scored" or result.breakdown is None:
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    if args.breakdown:
        for rule, points in result.breakdown.as_dict().items():
            print(f"  {rule:<18} {points:>5}")
        print(f"  {'total':<18} {result.breakdown.total:>5}")
    else:
        print(result.breakdown.total)
