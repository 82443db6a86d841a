"""Backoff policy interface.

Concrete delay algorithms live with the host application; rebound only
consumes the ``reset``/``next_backoff`` contract.
"""

from .base import STOP, BaseBackOff
from .null import StopBackOff, ZeroBackOff

__all__ = ["STOP", "BaseBackOff", "StopBackOff", "ZeroBackOff"]
