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
Hash index from keys to slot handles.
'''

from collections.abc import Hashable
import operator
from typing import Any, Generic, Optional, TypeVar

from ..exceptions import KeyHashTypeMismatch
from ..typing import Handle


__all__ = ['HashedKey', 'KeyIndex', 'key_hash']


K = TypeVar('K', bound=Hashable)


def key_hash(key: Any) -> int:
    '''
    Compute the hash of a key through its type's ``__hash__``.

    Unlike `hash`, this does not coerce the result, so a ``__hash__``
    returning a non-integer is reported as `KeyHashTypeMismatch` instead
    of the interpreter's generic `TypeError`. Exceptions raised inside
    ``__hash__`` propagate unchanged.
    '''
    hash_func = getattr(type(key), '__hash__', None)
    if hash_func is None:
        # Unhashable type; let the interpreter raise its usual error.
        return hash(key)
    result = hash_func(key)
    try:
        return operator.index(result)
    except TypeError:
        raise KeyHashTypeMismatch(
            f'__hash__ of {type(key).__name__!r} returned '
            f'{type(result).__name__!r}, expected an integer'
        ) from None


class HashedKey(Generic[K]):
    '''
    Key wrapper carrying a precomputed hash.

    The wrapped key's ``__hash__`` runs exactly once, when the wrapper is
    built. Dictionary probing afterwards only compares the stored hash
    and, on a hash match, the keys themselves.

    A retired wrapper compares equal to nothing but itself, so removing
    it from a dictionary never runs the key's own ``__eq__``.
    '''
    __slots__ = ('key', 'hash', 'retired')

    key: K
    hash: int
    retired: bool

    def __init__(self, key: K):
        self.hash = key_hash(key)
        self.key = key
        self.retired = False

    def __hash__(self) -> int:
        return self.hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashedKey):
            return NotImplemented
        if self.hash != other.hash or self.retired or other.retired:
            return False
        return self.key is other.key or bool(self.key == other.key)

    def __repr__(self) -> str:
        return f'HashedKey({self.key!r})'


class KeyIndex(Generic[K]):
    '''Mapping from hashed keys to slot handles.'''
    _d: dict[HashedKey[K], Handle]

    def __init__(self):
        self._d = {}

    def __len__(self) -> int:
        return len(self._d)

    def __contains__(self, hkey: HashedKey[K]) -> bool:
        return hkey in self._d

    def lookup(self, hkey: HashedKey[K]) -> Optional[Handle]:
        return self._d.get(hkey)

    def insert(self, hkey: HashedKey[K], handle: Handle) -> None:
        self._d[hkey] = handle

    def remove(self, hkey: HashedKey[K]) -> Optional[Handle]:
        return self._d.pop(hkey, None)

    def discard(self, hkey: HashedKey[K]) -> Optional[Handle]:
        '''
        Remove the record stored under this exact wrapper.

        The wrapper is retired first, so probing past colliding keys
        compares by identity only and cannot raise.
        '''
        hkey.retired = True
        return self._d.pop(hkey, None)

    def clear(self) -> None:
        self._d.clear()
