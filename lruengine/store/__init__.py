'''
Storage layer of the cache engine: cell arena, recency list and key index.
'''

from .index import HashedKey, KeyIndex, key_hash
from .recency import RecencyList
from .slots import SlotStore

__all__ = [
    'HashedKey',
    'KeyIndex',
    'RecencyList',
    'SlotStore',
    'key_hash',
]
