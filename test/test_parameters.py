# LRUEngine: Python library for least-recently-used caching
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

import json

import numpy
import pytest

from lruengine import CacheParameters, InvalidCapacity, LRUCache
from lruengine.parameters import check_capacity


# TESTS
def test_defaults():
    params = CacheParameters()
    assert params.capacity is None
    assert params.initial_slots == 16
    assert params.growth_factor == 2.0


@pytest.mark.parametrize('slots, growth, expected', [
    (0, 2.0, (16, 2.0)),
    (-5, 1.5, (16, 1.5)),
    (8, 1.0, (8, 2.0)),
    (8, 0.5, (8, 2.0)),
    (3, 1.25, (3, 1.25)),
])
def test_sanitize(slots, growth, expected):
    params = CacheParameters(initial_slots=slots, growth_factor=growth)
    params.sanitize()
    assert (params.initial_slots, params.growth_factor) == expected


def test_sanitize_keeps_capacity():
    params = CacheParameters(capacity=-1)
    params.sanitize()
    assert params.capacity == -1
    with pytest.raises(InvalidCapacity):
        params.validate()


@pytest.mark.parametrize('cap, expected', [
    (None, None), (0, 0), (5, 5), (numpy.int32(7), 7),
])
def test_check_capacity(cap, expected):
    result = check_capacity(cap)
    assert result == expected
    assert result is None or type(result) is int


def test_json_round_trip():
    params = CacheParameters(capacity=12, initial_slots=4, growth_factor=1.5)
    data = json.loads(json.dumps(params.toJSON()))
    assert data == {'capacity': 12, 'initial_slots': 4, 'growth_factor': 1.5}
    assert CacheParameters.fromJSON(data) == params


def test_from_json_partial():
    assert CacheParameters.fromJSON({'capacity': 3}) == CacheParameters(3)


def test_from_json_rejects_unknown_fields():
    with pytest.raises(ValueError, match='max_size'):
        CacheParameters.fromJSON({'max_size': 3})


def test_cache_from_parameters():
    params = CacheParameters.fromJSON({'capacity': 2, 'initial_slots': 1})
    cache = LRUCache(params=params)
    for i in range(5):
        cache[i] = i
    assert cache.length() == 2
    assert cache.lru_pair() == (3, 3)
