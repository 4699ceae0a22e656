"""Bulk BNB balance checker with retrying, failover-aware RPC queries."""

__version__ = "0.1.0"
