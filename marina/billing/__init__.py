"""Mini README: Billing utilities for the marina.

Exposes the per-foot rate table together with the helpers that bill a month
of storage and record payments against a boat's running balance.
"""

from .engine import MONTHLY_RATES, accept_payment, apply_monthly_charges, monthly_charge

__all__ = ["MONTHLY_RATES", "accept_payment", "apply_monthly_charges", "monthly_charge"]
