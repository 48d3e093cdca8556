"""
FastAPI Routes.

Registration order matters: fixed single-segment paths (assets, landing)
must be added before ``/{nobt_id}``.
"""

from . import assets, balances, bills, expenses, landing, nobts

__all__ = ["assets", "balances", "bills", "expenses", "landing", "nobts"]
