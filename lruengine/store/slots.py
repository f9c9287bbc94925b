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
'''
Arena of storage cells with stable, generational handles.

Every cell holds one key, one value and two links to neighbouring cells.
Links are plain cell indices stored in numpy arrays; keys and values are
kept in parallel Python lists. Cells ``HEAD`` and ``TAIL`` are reserved
as list sentinels and are never handed out by `SlotStore.allocate`.
'''

import logging
import math
from typing import Generic, Optional, TypeVar

import numpy
from numpy.typing import NDArray

from ..exceptions import StaleHandleError
from ..typing import Handle


__all__ = ['HEAD', 'NIL', 'RESERVED', 'TAIL', 'SlotStore']


K = TypeVar('K')
V = TypeVar('V')


logger = logging.getLogger(__name__)


#: Link value of an unlinked cell.
NIL = -1

#: Sentinel cell in front of the most recently used entry.
HEAD = 0

#: Sentinel cell behind the least recently used entry.
TAIL = 1

#: Number of reserved sentinel cells at the start of the arena.
RESERVED = 2


class SlotStore(Generic[K, V]):
    '''
    Storage arena for cache entries.

    Cells are allocated from a free list in O(1). When the free list is
    exhausted the arena grows geometrically, so allocation is O(1)
    amortized. Freed cells are reused in LIFO order. Freeing a cell
    drops its key and value references and bumps its generation, which
    invalidates every outstanding handle to it.
    '''
    _keys: list[Optional[K]]
    _vals: list[Optional[V]]
    _gen: NDArray[numpy.int64]
    _live: NDArray[numpy.bool_]
    _free: list[int]
    _growth: float
    prev: NDArray[numpy.intp]
    next: NDArray[numpy.intp]

    def __init__(self, initial_slots: int = 16, growth_factor: float = 2.0):
        if initial_slots <= 0:
            raise ValueError('initial slot count must be strictly positive')
        if growth_factor <= 1.0:
            raise ValueError('growth factor must be strictly greater than 1')
        self._growth = growth_factor

        size = RESERVED + initial_slots
        self._keys = [None] * size
        self._vals = [None] * size
        self._gen = numpy.zeros(size, dtype=numpy.int64)
        self._live = numpy.zeros(size, dtype=numpy.bool_)
        self.prev = numpy.full(size, NIL, dtype=numpy.intp)
        self.next = numpy.full(size, NIL, dtype=numpy.intp)
        self._free = list(range(size - 1, RESERVED - 1, -1))

    @property
    def capacity(self) -> int:
        '''Number of allocatable cells currently in the arena.'''
        return len(self._keys) - RESERVED

    def __len__(self) -> int:
        return self.capacity - len(self._free)

    def _grow(self) -> None:
        old_size = len(self._keys)
        new_size = RESERVED + max(
            self.capacity + 1, math.ceil(self.capacity * self._growth)
        )
        added = new_size - old_size

        self._keys.extend([None] * added)
        self._vals.extend([None] * added)
        self._gen = numpy.concatenate(
            (self._gen, numpy.zeros(added, dtype=numpy.int64))
        )
        self._live = numpy.concatenate(
            (self._live, numpy.zeros(added, dtype=numpy.bool_))
        )
        self.prev = numpy.concatenate(
            (self.prev, numpy.full(added, NIL, dtype=numpy.intp))
        )
        self.next = numpy.concatenate(
            (self.next, numpy.full(added, NIL, dtype=numpy.intp))
        )
        self._free.extend(range(new_size - 1, old_size - 1, -1))

        logger.debug('slot arena grown from %d to %d cells',
                     old_size - RESERVED, new_size - RESERVED)

    def is_live(self, handle: Handle) -> bool:
        '''Check whether a handle still refers to its cell.'''
        idx, gen = handle
        return bool(
            RESERVED <= idx < len(self._keys)
            and self._live[idx] and self._gen[idx] == gen
        )

    def index(self, handle: Handle) -> int:
        '''
        Resolve a handle to its cell index.

        :raise StaleHandleError: The handle does not refer to a live cell.
        '''
        if not self.is_live(handle):
            raise StaleHandleError(f'stale or foreign slot handle {handle}')
        return handle[0]

    def handle(self, idx: int) -> Handle:
        '''Return the current handle of a live cell.'''
        if idx < RESERVED or idx >= len(self._keys) or not self._live[idx]:
            raise StaleHandleError(f'cell {idx} is not live')
        return Handle(idx, int(self._gen[idx]))

    def allocate(self, key: K, value: V) -> Handle:
        '''
        Reserve a cell for a key-value pair.

        The new cell is not linked to any other cell.
        '''
        if not self._free:
            self._grow()
        idx = self._free.pop()
        self._keys[idx] = key
        self._vals[idx] = value
        self._live[idx] = True
        self.prev[idx] = NIL
        self.next[idx] = NIL
        return Handle(idx, int(self._gen[idx]))

    def free(self, handle: Handle) -> tuple[K, V]:
        '''
        Release a cell and return the pair it held.

        The caller is responsible for unlinking the cell first.
        '''
        idx = self.index(handle)
        key, value = self._keys[idx], self._vals[idx]
        self._keys[idx] = None
        self._vals[idx] = None
        self._live[idx] = False
        self._gen[idx] += 1
        self.prev[idx] = NIL
        self.next[idx] = NIL
        self._free.append(idx)
        return key, value                                   # type: ignore

    def get(self, handle: Handle) -> tuple[K, V]:
        idx = self.index(handle)
        return self._keys[idx], self._vals[idx]             # type: ignore

    def key(self, handle: Handle) -> K:
        return self._keys[self.index(handle)]               # type: ignore

    def value(self, handle: Handle) -> V:
        return self._vals[self.index(handle)]               # type: ignore

    def set_value(self, handle: Handle, value: V) -> V:
        '''Replace the value of a cell in place and return the old one.'''
        idx = self.index(handle)
        old = self._vals[idx]
        self._vals[idx] = value
        return old                                          # type: ignore

    def clear(self) -> None:
        '''Free every cell at once.'''
        size = len(self._keys)
        self._gen[self._live] += 1
        self._live[:] = False
        self._keys = [None] * size
        self._vals = [None] * size
        # Sentinel links belong to the recency list.
        self.prev[RESERVED:] = NIL
        self.next[RESERVED:] = NIL
        self._free = list(range(size - 1, RESERVED - 1, -1))
