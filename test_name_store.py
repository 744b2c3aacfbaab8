"""
Tests for the in-memory history and frequency store
"""
import asyncio

from name_parser import NameCandidate
from name_store import NameHistoryStore, HISTORY_LIMIT, category_key


def candidates(*names):
    return [NameCandidate(name=n, meaning=f"about {n}") for n in names]


def test_category_key_is_trimmed_lowercase():
    assert category_key("  Coffee Shop ") == "coffee shop"


def test_record_search_counts_hits():
    store = NameHistoryStore()

    async def run():
        await store.record_search("tech")
        await store.record_search("tech")
        await store.record_search("toys")

    asyncio.run(run())
    assert store.frequencies() == {"tech": 2, "toys": 1}
    assert store.history("tech") == []


def test_filter_fresh_is_case_insensitive_and_read_only():
    store = NameHistoryStore()

    async def run():
        await store.merge("tea", candidates("Nova", "Zen"))
        return await store.filter_fresh("tea", candidates("nova", "Brew", "ZEN"))

    fresh = asyncio.run(run())
    assert [c.name for c in fresh] == ["Brew"]
    assert [c.name for c in store.history("tea")] == ["Nova", "Zen"]


def test_merge_keeps_earliest_copy():
    store = NameHistoryStore()

    async def run():
        await store.merge("tea", candidates("Nova"))
        await store.merge("tea", [NameCandidate(name="NOVA", meaning="again"), *candidates("Brew")])

    asyncio.run(run())
    history = store.history("tea")
    assert [(c.name, c.meaning) for c in history] == [("Nova", "about Nova"), ("Brew", "about Brew")]


def test_merge_truncates_to_most_recent():
    store = NameHistoryStore()
    names = [f"N{i}" for i in range(45)]

    async def run():
        for start in range(0, 45, 10):
            await store.merge("toys", candidates(*names[start:start + 10]))
            assert len(store.history("toys")) <= HISTORY_LIMIT

    asyncio.run(run())
    assert [c.name for c in store.history("toys")] == names[-HISTORY_LIMIT:]


def test_concurrent_merges_keep_every_name():
    store = NameHistoryStore(history_limit=100)

    async def run():
        await asyncio.gather(*[
            store.merge("tech", candidates(f"A{i}", f"B{i}")) for i in range(20)
        ])
        await asyncio.gather(*[store.record_search("tech") for _ in range(20)])

    asyncio.run(run())
    assert len(store.history("tech")) == 40
    assert store.frequencies()["tech"] == 20


def test_updates_wait_for_the_category_lock():
    store = NameHistoryStore()

    async def run():
        lock = store._lock("tech")
        await lock.acquire()
        merge = asyncio.create_task(store.merge("tech", candidates("Nova")))
        search = asyncio.create_task(store.record_search("tech"))
        # other categories are not blocked
        await store.merge("toys", candidates("Zest"))
        for _ in range(5):
            await asyncio.sleep(0)

        blocked = (merge.done(), search.done(), store.history("tech"), store.frequencies())
        lock.release()
        await asyncio.gather(merge, search)
        return blocked

    blocked = asyncio.run(run())
    assert blocked == (False, False, [], {})
    assert [c.name for c in store.history("tech")] == ["Nova"]
    assert [c.name for c in store.history("toys")] == ["Zest"]
    assert store.frequencies() == {"tech": 1}
