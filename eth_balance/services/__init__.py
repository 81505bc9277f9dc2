"""Service modules"""
from .balance_service import BalanceService
from .resolver import BalanceResolver

__all__ = ["BalanceResolver", "BalanceService"]
