"""Pricing for USD value estimates."""

from bsc_balance_checker.pricing.fixed import BNB_USD_ESTIMATE, FixedPricing

__all__ = ["BNB_USD_ESTIMATE", "FixedPricing"]
