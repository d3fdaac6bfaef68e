"""Unified command-line interface for receipt-points.

Usage:
    receipt-points serve [--host HOST] [--port PORT]
    receipt-points score <receipt.json> [--breakdown]
"""
