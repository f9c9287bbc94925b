# LRUEngine: Python library for least-recently-used caching
#
# Copyright 2026 The LRUEngine Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Least-recently-used cache engine.

The engine keeps three structures in lockstep: a `SlotStore` holding the
entries, a `RecencyList` ordering them from most to least recently used,
and a `KeyIndex` mapping keys to their cells. Every entry is present in
all three or in none of them.
"""

import dataclasses
from dataclasses import dataclass
import logging
from collections.abc import Callable, Hashable, Iterator
from typing import Any, Generic, Optional, TypeVar, final

from .parameters import CacheParameters, check_capacity
from .store import HashedKey, KeyIndex, RecencyList, SlotStore
from .typing import Handle, Pair


__all__ = ['CacheStats', 'LRUCache']


K = TypeVar('K', bound=Hashable)
V = TypeVar('V')
T = TypeVar('T')


logger = logging.getLogger(__name__)


_MISSING: Any = object()


@dataclass(slots=True)
class CacheStats:
    '''
    Counters collected while a cache is in use.

    Only capacity-driven removals count as evictions; `LRUCache.pop`,
    `LRUCache.delete` and `LRUCache.clear` do not.
    '''

    #: Lookups through `LRUCache.get` that found their key.
    hits: int = 0

    #: Lookups through `LRUCache.get` that did not.
    misses: int = 0

    #: Entries created by `LRUCache.set`.
    insertions: int = 0

    #: Values replaced by `LRUCache.set`.
    updates: int = 0

    #: Entries dropped to honour the capacity.
    evictions: int = 0

    @property
    def hit_ratio(self) -> float:
        '''Fraction of lookups that were hits. Zero without lookups.'''
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def reset(self) -> None:
        '''Zero all counters.'''
        self.hits = 0
        self.misses = 0
        self.insertions = 0
        self.updates = 0
        self.evictions = 0


@final
class LRUCache(Generic[K, V]):
    '''
    Associative container that remembers the order in which keys were used.

    `get` and `set` make their key the most recently used one; `peek`,
    `has_key` and `lru_pair` leave the order alone. When the cache has a
    capacity, inserting a new key into a full cache evicts the least
    recently used entry.

    The cache supports the mapping operators but is deliberately not a
    `collections.abc.Mapping`: `pop` takes no key and removes the least
    recently used pair, `keys`/`items`/`values` return one-shot
    iterators instead of views, and ``cache[k]`` reorders entries, so
    copying through the mapping protocol (``dict(cache)``) would touch
    every entry and reverse the recency order. Use `to_dict` instead.

    Parameters
    ----------
    capacity : int, optional
        Maximum number of entries. `None` (the default) leaves the cache
        uncapped. A capacity can be added or changed later through
        `resize`. Overrides ``params.capacity`` if given.
    params : CacheParameters, optional
        Tuning parameters. The object is copied, not retained.

    Raises
    ------
    InvalidCapacity
        The capacity is negative.
    TypeError
        The capacity is not an integer.
    '''
    _cap: Optional[int]
    _params: CacheParameters
    _store: SlotStore[HashedKey[K], V]
    _recency: RecencyList
    _index: KeyIndex[K]
    _mutations: int

    #: Usage counters.
    stats: CacheStats

    def __init__(self, capacity: Optional[int] = None, *,
                 params: Optional[CacheParameters] = None):
        params = (CacheParameters() if params is None
                  else dataclasses.replace(params))
        if capacity is not None:
            params.capacity = capacity
        params.sanitize()
        params.validate()

        self._params = params
        self._cap = params.capacity
        self._store = SlotStore(params.initial_slots, params.growth_factor)
        self._recency = RecencyList(self._store)
        self._index = KeyIndex()
        self._mutations = 0
        self.stats = CacheStats()

    # Internal helpers

    def _pair(self, handle: Handle) -> Pair[K, V]:
        hkey, value = self._store.get(handle)
        return hkey.key, value

    def _key(self, handle: Handle) -> K:
        return self._store.key(handle).key

    def _discard(self, handle: Handle) -> Pair[K, V]:
        '''Remove an entry from all three structures.'''
        hkey = self._store.key(handle)
        self._index.discard(hkey)
        self._recency.remove(handle)
        _, value = self._store.free(handle)
        self._mutations += 1
        return hkey.key, value

    def _evict(self, cap: int) -> None:
        while len(self._index) > cap:
            handle = self._recency.peek_back()
            assert handle is not None
            key, _ = self._discard(handle)
            self.stats.evictions += 1
            logger.debug('evicted %r (length %d, capacity %d)',
                         key, len(self._index), cap)

    def _walk(self, project: Callable[[Handle], T],
              reverse: bool = False) -> Iterator[T]:
        mutations = self._mutations
        handles = reversed(self._recency) if reverse else iter(self._recency)

        def generate() -> Iterator[T]:
            while True:
                if self._mutations != mutations:
                    raise RuntimeError('LRUCache mutated during iteration')
                handle = next(handles, None)
                if handle is None:
                    return
                yield project(handle)

        return generate()

    # Configuration

    @property
    def capacity(self) -> Optional[int]:
        '''Maximum number of entries, or `None` if uncapped.'''
        return self._cap

    @capacity.setter
    def capacity(self, cap: Optional[int]) -> None:
        self.resize(cap)

    @property
    def parameters(self) -> CacheParameters:
        '''Copy of the parameters reflecting the current capacity.'''
        return dataclasses.replace(self._params, capacity=self._cap)

    def resize(self, cap: Optional[int]) -> None:
        '''
        Change the capacity.

        If the cache holds more entries than the new capacity allows,
        the least recently used ones are evicted. `None` removes the
        bound and never evicts.

        :raise InvalidCapacity: `cap` is negative. Nothing is changed.
        '''
        cap = check_capacity(cap)
        logger.debug('resizing cache from %s to %s with %d entries',
                     self._cap, cap, len(self._index))
        if cap is not None:
            self._evict(cap)
        self._cap = cap

    # Lookup

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        '''
        Look up a value and mark its key as most recently used.

        A miss returns `default` and changes nothing.
        '''
        handle = self._index.lookup(HashedKey(key))
        if handle is None:
            self.stats.misses += 1
            return default
        self._recency.move_to_front(handle)
        self._mutations += 1
        self.stats.hits += 1
        return self._store.value(handle)

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        '''Look up a value without touching the recency order.'''
        handle = self._index.lookup(HashedKey(key))
        if handle is None:
            return default
        return self._store.value(handle)

    def has_key(self, key: K) -> bool:
        '''Check for a key without touching the recency order.'''
        return HashedKey(key) in self._index

    def lru_pair(self) -> Optional[Pair[K, V]]:
        '''Least recently used pair, or `None` if the cache is empty.'''
        handle = self._recency.peek_back()
        if handle is None:
            return None
        return self._pair(handle)

    def length(self) -> int:
        '''Number of entries.'''
        return len(self._index)

    size = length

    def empty(self) -> bool:
        '''True if the cache holds no entries.'''
        return len(self._index) == 0

    # Mutation

    def set(self, key: K, value: V) -> Optional[V]:
        '''
        Store a pair and mark its key as most recently used.

        Returns
        -------
        The value previously stored under `key`, or `None` if the key is
        new. A new key may evict the least recently used entry, or the
        new entry itself if the capacity is zero.
        '''
        hkey = HashedKey(key)
        handle = self._index.lookup(hkey)
        if handle is not None:
            old = self._store.set_value(handle, value)
            self._recency.move_to_front(handle)
            self._mutations += 1
            self.stats.updates += 1
            return old

        handle = self._store.allocate(hkey, value)
        try:
            self._index.insert(hkey, handle)
        except BaseException:
            self._store.free(handle)
            raise
        self._recency.push_front(handle)
        self._mutations += 1
        self.stats.insertions += 1

        if self._cap is not None:
            try:
                self._evict(self._cap)
            except BaseException:
                if self._store.is_live(handle):
                    self._discard(handle)
                    self.stats.insertions -= 1
                raise
        return None

    store = set

    def delete(self, key: K, default: Optional[V] = None) -> Optional[V]:
        '''Remove a key and return its value, or `default` on a miss.'''
        handle = self._index.lookup(HashedKey(key))
        if handle is None:
            return default
        return self._discard(handle)[1]

    def pop(self) -> Optional[Pair[K, V]]:
        '''Remove and return the least recently used pair.'''
        handle = self._recency.peek_back()
        if handle is None:
            return None
        return self._discard(handle)

    def clear(self) -> None:
        '''Remove all entries. The capacity is kept.'''
        self._index.clear()
        self._store.clear()
        self._recency.clear()
        self._mutations += 1

    # Iteration

    def items(self) -> Iterator[Pair[K, V]]:
        '''Iterate over pairs, most recently used first.'''
        return self._walk(self._pair)

    def keys(self) -> Iterator[K]:
        '''Iterate over keys, most recently used first.'''
        return self._walk(self._key)

    def values(self) -> Iterator[V]:
        '''Iterate over values, most recently used first.'''
        return self._walk(self._store.value)

    each_pair = items
    each_key = keys
    each_value = values

    def to_dict(self) -> dict[K, V]:
        '''Snapshot of the contents, most recently used first.'''
        return dict(self.items())

    # Mapping protocol

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return len(self._index) > 0

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)                        # type: ignore

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __reversed__(self) -> Iterator[K]:
        return self._walk(self._key, reverse=True)

    def __getitem__(self, key: K) -> V:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value                                    # type: ignore

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if self.delete(key, _MISSING) is _MISSING:
            raise KeyError(key)

    def __repr__(self) -> str:
        return (f'{type(self).__name__}(capacity={self._cap!r}, '
                f'length={len(self._index)})')
