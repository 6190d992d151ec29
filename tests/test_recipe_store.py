"""
Tests for the in-memory recipe store.
"""
from __future__ import annotations

import threading

from recipe_catalog_api.app.schemas.recipe import Recipe, RecipeCreate
from recipe_catalog_api.app.services.recipe_store import MemoryRecipeStore
from recipe_catalog_api.app.services.statistics_service import StatisticsService


def test_add_assigns_sequential_ids(store):
    tea = store.add(RecipeCreate(name="Tea"))
    coffee = store.add(RecipeCreate(name="Coffee", cooked=True))

    assert tea == Recipe(id=1, name="Tea", cooked=False)
    assert coffee == Recipe(id=2, name="Coffee", cooked=True)
    assert len(store) == 2


def test_get_returns_found_flag(store):
    store.add(RecipeCreate(name="Salad"))

    item, found = store.get(1)
    assert found is True
    assert item.name == "Salad"

    item, found = store.get(999)
    assert found is False
    assert item is None


def test_get_with_non_positive_id_is_not_found(store):
    store.add(RecipeCreate(name="Salad"))
    assert store.get(0) == (None, False)
    assert store.get(-1) == (None, False)


def test_list_preserves_insertion_order(store):
    for name in ("Soup", "Salad", "Bread"):
        store.add(RecipeCreate(name=name))

    assert [r.name for r in store.list()] == ["Soup", "Salad", "Bread"]
    assert [r.id for r in store.list()] == [1, 2, 3]


def test_list_returns_independent_snapshot(store):
    store.add(RecipeCreate(name="Soup"))
    snapshot = store.list()

    store.add(RecipeCreate(name="Salad"))
    snapshot.clear()

    assert len(store.list()) == 2


def test_stores_are_independent():
    first = MemoryRecipeStore()
    second = MemoryRecipeStore()
    first.add(RecipeCreate(name="Soup"))

    assert second.list() == []
    assert second.add(RecipeCreate(name="Salad")).id == 1


def test_concurrent_adds_never_duplicate_or_skip_ids(store):
    workers, per_worker = 8, 200
    start = threading.Barrier(workers)
    returned = [[] for _ in range(workers)]

    def worker(index):
        start.wait()
        for i in range(per_worker):
            returned[index].append(store.add(RecipeCreate(name=f"r{index}-{i}")).id)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = workers * per_worker
    all_ids = sorted(i for ids in returned for i in ids)
    assert all_ids == list(range(1, total + 1))
    # Each caller sees its own ids strictly increasing.
    for ids in returned:
        assert ids == sorted(ids)
    assert [r.id for r in store.list()] == list(range(1, total + 1))


def test_readers_see_consistent_snapshots_during_writes(store):
    stop = threading.Event()
    problems = []

    def reader():
        while not stop.is_set():
            snapshot = store.list()
            if [r.id for r in snapshot] != list(range(1, len(snapshot) + 1)):
                problems.append(snapshot)
            stats = StatisticsService.summarize(snapshot)
            if stats.total != len(snapshot):
                problems.append(stats)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in readers:
        t.start()
    for i in range(500):
        store.add(RecipeCreate(name=f"dish {i}", cooked=i % 2 == 0))
    stop.set()
    for t in readers:
        t.join()

    assert problems == []
    assert len(store) == 500


def test_summarize_counts_cooked():
    stats = StatisticsService.summarize(
        [
            Recipe(id=1, name="Soup", cooked=True),
            Recipe(id=2, name="Salad", cooked=False),
            Recipe(id=3, name="Stew", cooked=True),
        ]
    )
    assert stats.total == 3
    assert stats.cooked == 2


def test_summarize_empty():
    stats = StatisticsService.summarize([])
    assert (stats.total, stats.cooked) == (0, 0)
