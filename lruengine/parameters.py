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
User-facing configuration of a cache instance.
"""

from dataclasses import dataclass
import operator
from typing import Optional

from .exceptions import InvalidCapacity
from .typing import JSONSerializable


__all__ = ['CacheParameters', 'check_capacity']


def check_capacity(cap: Optional[int]) -> Optional[int]:
    '''
    Normalize a capacity argument.

    Parameters
    ----------
    cap : int, optional
        Maximum number of entries. `None` means uncapped.

    Returns
    -------
    The capacity as a plain `int`, or `None`.

    Raises
    ------
    TypeError
        `cap` is neither `None` nor integer-like.
    InvalidCapacity
        `cap` is negative.
    '''
    if cap is None:
        return None
    cap = operator.index(cap)
    if cap < 0:
        raise InvalidCapacity(f'capacity must be non-negative, got {cap}')
    return cap


@dataclass
class CacheParameters(JSONSerializable):
    '''
    User specified parameters for a cache.

    Attributes
    ----------
    capacity : int, optional
        Maximum number of entries. Defaults to `None` (uncapped).
    initial_slots : int
        Number of storage cells allocated up front. Defaults to ``16``.
    growth_factor : float
        Factor by which the cell arena grows when it runs out of free
        cells. Must be strictly greater than ``1.0``. Defaults to
        ``2.0``.
    '''

    #: Maximum number of entries. `None` disables eviction on insert.
    capacity: Optional[int] = None

    #: Number of cells allocated when the store is created.
    initial_slots: int = 16

    #: Arena growth multiplier. Must be strictly greater than 1.
    growth_factor: float = 2.0

    def sanitize(self) -> None:
        '''
        Sanitizes tuning parameters.

        The capacity is left alone; see `validate`.
        '''
        if self.initial_slots <= 0:
            self.initial_slots = 16

        if self.growth_factor <= 1.0:
            self.growth_factor = 2.0

    def validate(self) -> None:
        '''
        Reject parameters that cannot be repaired.

        :raise InvalidCapacity: `capacity` is negative.
        :raise TypeError: `capacity` is not integer-like.
        '''
        self.capacity = check_capacity(self.capacity)
