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

import pytest

from lruengine.exceptions import StaleHandleError
from lruengine.store.recency import RecencyList
from lruengine.store.slots import SlotStore


# FIXTURES
@pytest.fixture
def store() -> SlotStore:
    return SlotStore(initial_slots=2)


@pytest.fixture
def recency(store) -> RecencyList:
    return RecencyList(store)


# HELPERS
def keys(store, handles):
    return [store.key(h) for h in handles]


def fill(store, recency, n):
    handles = []
    for i in range(n):
        h = store.allocate(i, i)
        recency.push_front(h)
        handles.append(h)
    return handles


# TESTS
def test_empty_list(recency):
    assert len(recency) == 0
    assert recency.peek_back() is None
    assert recency.peek_front() is None
    assert recency.pop_back() is None
    assert list(recency) == []
    assert list(reversed(recency)) == []


def test_push_front_orders_most_recent_first(store, recency):
    fill(store, recency, 5)
    assert len(recency) == 5
    assert keys(store, recency) == [4, 3, 2, 1, 0]
    assert keys(store, reversed(recency)) == [0, 1, 2, 3, 4]
    assert store.key(recency.peek_front()) == 4
    assert store.key(recency.peek_back()) == 0


def test_single_element(store, recency):
    (h,) = fill(store, recency, 1)
    assert recency.peek_front() == recency.peek_back() == h
    recency.move_to_front(h)
    assert list(recency) == [h]
    assert recency.pop_back() == h
    assert len(recency) == 0
    assert recency.pop_back() is None
    recency.push_front(h)
    assert list(recency) == [h]


@pytest.mark.parametrize('pos', [0, 2, 4])
def test_remove(store, recency, pos):
    handles = fill(store, recency, 5)
    recency.remove(handles[pos])
    expected = [i for i in range(4, -1, -1) if i != pos]
    assert keys(store, recency) == expected
    assert keys(store, reversed(recency)) == expected[::-1]
    assert len(recency) == 4


@pytest.mark.parametrize('pos', [0, 2, 4])
def test_move_to_front(store, recency, pos):
    handles = fill(store, recency, 5)
    recency.move_to_front(handles[pos])
    expected = [pos] + [i for i in range(4, -1, -1) if i != pos]
    assert keys(store, recency) == expected
    assert keys(store, reversed(recency)) == expected[::-1]
    assert len(recency) == 5


def test_pop_back_drains_in_order(store, recency):
    fill(store, recency, 4)
    popped = []
    while (h := recency.pop_back()) is not None:
        popped.append(store.key(h))
    assert popped == [0, 1, 2, 3]
    assert len(recency) == 0


def test_double_link_and_unlink_are_rejected(store, recency):
    (h,) = fill(store, recency, 1)
    with pytest.raises(StaleHandleError):
        recency.push_front(h)
    recency.remove(h)
    with pytest.raises(StaleHandleError):
        recency.remove(h)
    with pytest.raises(StaleHandleError):
        recency.move_to_front(h)
    assert len(recency) == 0


def test_links_survive_arena_growth(store, recency):
    handles = fill(store, recency, 40)
    recency.move_to_front(handles[0])
    assert keys(store, recency) == [0] + list(range(39, 0, -1))


def test_iteration_allows_unlinking_yielded_handle(store, recency):
    fill(store, recency, 5)
    for h in recency:
        recency.remove(h)
    assert len(recency) == 0


def test_clear(store, recency):
    fill(store, recency, 5)
    recency.clear()
    store.clear()
    assert len(recency) == 0
    assert list(recency) == []
    fill(store, recency, 2)
    assert keys(store, recency) == [1, 0]
