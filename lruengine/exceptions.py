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
Exceptions raised by the cache engine.

Errors raised by a key's own ``__hash__`` method are not wrapped; they
propagate out of the cache operation unchanged.
'''


__all__ = [
    'InvalidCapacity',
    'KeyHashTypeMismatch',
    'LRUEngineError',
    'StaleHandleError',
]


class LRUEngineError(Exception):
    '''Base class for errors raised by the engine itself.'''


class InvalidCapacity(LRUEngineError, ValueError):
    '''Capacity argument is negative.'''


class KeyHashTypeMismatch(LRUEngineError, TypeError):
    '''A key's ``__hash__`` returned something that is not an integer.'''


class StaleHandleError(LRUEngineError, LookupError):
    '''
    Slot handle does not refer to a live cell.

    This indicates a bug in the caller of the storage layer. The cache
    engine never lets a handle outlive its cell.
    '''
