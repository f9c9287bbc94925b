'''
Types shared between the storage layer and the cache engine.
'''

from typing import NamedTuple, TypeVar


__all__ = ['Handle', 'Pair']


K = TypeVar('K')
V = TypeVar('V')


class Handle(NamedTuple):
    '''
    Stable reference to a cell of a slot store.

    A handle stays valid until its cell is freed. Freeing bumps the
    cell's generation, so a handle kept past that point no longer
    matches and is rejected instead of reaching the cell's next tenant.
    '''
    index: int
    generation: int


#: Key-value pair as returned by `pop` and `lru_pair`.
Pair = tuple[K, V]
