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
Recency ordering over the cells of a slot store.
'''

from collections.abc import Iterator
from typing import Optional

from ..exceptions import StaleHandleError
from ..typing import Handle
from .slots import HEAD, NIL, TAIL, SlotStore


__all__ = ['RecencyList']


class RecencyList:
    '''
    Doubly linked list of slot handles, most recently used first.

    The list is threaded through the ``prev``/``next`` link arrays of a
    `SlotStore` and bounded by its two sentinel cells, so insertion and
    removal never special-case an empty list or a single element. The
    link arrays are looked up on every access because the store
    replaces them when it grows.
    '''
    _store: SlotStore
    _len: int

    def __init__(self, store: SlotStore):
        self._store = store
        self._len = 0
        self._reset()

    def _reset(self) -> None:
        store = self._store
        store.next[HEAD] = TAIL
        store.prev[HEAD] = NIL
        store.prev[TAIL] = HEAD
        store.next[TAIL] = NIL

    def __len__(self) -> int:
        return self._len

    def _is_linked(self, idx: int) -> bool:
        return self._store.prev[idx] != NIL

    def _link_after(self, anchor: int, idx: int) -> None:
        store = self._store
        succ = int(store.next[anchor])
        store.prev[idx] = anchor
        store.next[idx] = succ
        store.next[anchor] = idx
        store.prev[succ] = idx

    def _unlink(self, idx: int) -> None:
        store = self._store
        pred, succ = int(store.prev[idx]), int(store.next[idx])
        store.next[pred] = succ
        store.prev[succ] = pred
        store.prev[idx] = NIL
        store.next[idx] = NIL

    def push_front(self, handle: Handle) -> None:
        '''Insert an unlinked handle at the most recently used end.'''
        idx = self._store.index(handle)
        if self._is_linked(idx):
            raise StaleHandleError(f'{handle} is already linked')
        self._link_after(HEAD, idx)
        self._len += 1

    def remove(self, handle: Handle) -> None:
        '''Unlink a handle from wherever it sits in the list.'''
        idx = self._store.index(handle)
        if not self._is_linked(idx):
            raise StaleHandleError(f'{handle} is not linked')
        self._unlink(idx)
        self._len -= 1

    def move_to_front(self, handle: Handle) -> None:
        '''Make a linked handle the most recently used one.'''
        idx = self._store.index(handle)
        if not self._is_linked(idx):
            raise StaleHandleError(f'{handle} is not linked')
        if self._store.next[HEAD] == idx:
            return
        self._unlink(idx)
        self._link_after(HEAD, idx)

    def peek_front(self) -> Optional[Handle]:
        '''Most recently used handle, or `None` if the list is empty.'''
        if self._len == 0:
            return None
        return self._store.handle(int(self._store.next[HEAD]))

    def peek_back(self) -> Optional[Handle]:
        '''Least recently used handle, or `None` if the list is empty.'''
        if self._len == 0:
            return None
        return self._store.handle(int(self._store.prev[TAIL]))

    def pop_back(self) -> Optional[Handle]:
        '''Unlink and return the least recently used handle.'''
        handle = self.peek_back()
        if handle is not None:
            self._unlink(handle.index)
            self._len -= 1
        return handle

    def __iter__(self) -> Iterator[Handle]:
        store = self._store
        idx = int(store.next[HEAD])
        while idx != TAIL:
            # Fetch the successor first so the caller may unlink the
            # yielded handle.
            succ = int(store.next[idx])
            yield store.handle(idx)
            idx = succ

    def __reversed__(self) -> Iterator[Handle]:
        store = self._store
        idx = int(store.prev[TAIL])
        while idx != HEAD:
            pred = int(store.prev[idx])
            yield store.handle(idx)
            idx = pred

    def clear(self) -> None:
        '''
        Forget all handles.

        Only the sentinels are relinked; the caller frees the cells.
        '''
        self._reset()
        self._len = 0
