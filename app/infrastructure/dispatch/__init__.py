"""Dispatch queue and the periodic worker draining it."""

from .queue import DispatchQueue
from .worker import DispatchWorker

__all__ = ["DispatchQueue", "DispatchWorker"]
