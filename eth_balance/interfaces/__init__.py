"""Protocol interfaces for the balance service."""
from .cache import BalanceCache
from .observer import BalanceObserver
from .transport import RpcTransport

__all__ = ["BalanceCache", "BalanceObserver", "RpcTransport"]
