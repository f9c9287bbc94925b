'''
Python library for least-recently-used caching with O(1) operations.
'''

from .cache import CacheStats, LRUCache
from .exceptions import (
    InvalidCapacity,
    KeyHashTypeMismatch,
    LRUEngineError,
    StaleHandleError,
)
from .parameters import CacheParameters

__all__ = [
    'CacheParameters',
    'CacheStats',
    'InvalidCapacity',
    'KeyHashTypeMismatch',
    'LRUCache',
    'LRUEngineError',
    'StaleHandleError',
]
