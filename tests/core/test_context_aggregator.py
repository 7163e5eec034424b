"""
Test suite for ContextAggregator.

Covers the six-field bundle invariant, per-collection isolation and the
concurrent fan-out of collection reads.

System role: Verification of context gathering
"""

import asyncio
from dataclasses import fields

import pytest

from backend.boundary.db.connection import RecordStoreClient
from backend.boundary.db.CRUD.record_crud import record_crud
from backend.configs import CollectionSettings
from backend.core.context.aggregator import ContextAggregator, ContextBundle
from backend.core.context.gateway import FetchResult, RecordStoreGateway


class FakeGateway:
    """Gateway returning canned results, optionally failing some collections."""

    def __init__(self, data: dict[str, list[dict]], failing: set[str] | None = None) -> None:
        self.data = data
        self.failing = failing or set()
        self.calls: list[str] = []

    async def fetch(self, collection: str) -> FetchResult:
        self.calls.append(collection)
        if collection in self.failing:
            return FetchResult(collection=collection, error="RuntimeError: down")
        return FetchResult(collection=collection, records=list(self.data.get(collection, [])))


FULL_DATA = {
    "events": [{"title": "Reunion"}],
    "fundraising": [{"title": "Library Fund"}],
    "internships": [{"title": "ML Intern"}],
    "notifications": [{"title": "Portal update"}],
    "users": [{"name": "Asha Rao"}],
    "mentorship": [{"mentorName": "Dr. Mehta"}],
}


class TestGather:
    """Test suite for ContextAggregator.gather."""

    @pytest.mark.asyncio
    async def test_gather_should_fetch_each_collection_once(self, collections: CollectionSettings) -> None:
        gateway = FakeGateway(FULL_DATA)
        aggregator = ContextAggregator(gateway, collections)

        await aggregator.gather()

        assert sorted(gateway.calls) == sorted(FULL_DATA)

    @pytest.mark.asyncio
    async def test_gather_should_map_collections_to_bundle_fields(self, collections: CollectionSettings) -> None:
        aggregator = ContextAggregator(FakeGateway(FULL_DATA), collections)

        bundle = await aggregator.gather()

        assert bundle.events == [{"title": "Reunion"}]
        assert bundle.fundraising == [{"title": "Library Fund"}]
        assert bundle.internships == [{"title": "ML Intern"}]
        assert bundle.notifications == [{"title": "Portal update"}]
        assert bundle.users == [{"name": "Asha Rao"}]
        assert bundle.mentorships == [{"mentorName": "Dr. Mehta"}]

    @pytest.mark.asyncio
    async def test_gather_should_use_configured_collection_names(self) -> None:
        names = CollectionSettings(events="alumni_events", users="profiles")
        gateway = FakeGateway({"alumni_events": [{"title": "Gala"}], "profiles": [{"name": "Ravi"}]})

        bundle = await ContextAggregator(gateway, names).gather()

        assert bundle.events == [{"title": "Gala"}]
        assert bundle.users == [{"name": "Ravi"}]
        assert "alumni_events" in gateway.calls

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing", [set(), {"events"}, {"events", "users", "mentorship"}, set(FULL_DATA)])
    async def test_bundle_should_always_have_six_lists(
        self, collections: CollectionSettings, failing: set[str]
    ) -> None:
        bundle = await ContextAggregator(FakeGateway(FULL_DATA, failing), collections).gather()

        bundle_fields = [f.name for f in fields(ContextBundle)]
        assert len(bundle_fields) == 6
        for name in bundle_fields:
            assert isinstance(getattr(bundle, name), list)

    @pytest.mark.asyncio
    async def test_failed_collection_should_not_affect_others(self, collections: CollectionSettings) -> None:
        bundle = await ContextAggregator(FakeGateway(FULL_DATA, {"fundraising"}), collections).gather()

        assert bundle.fundraising == []
        assert bundle.events == [{"title": "Reunion"}]
        assert bundle.internships == [{"title": "ML Intern"}]
        assert bundle.notifications == [{"title": "Portal update"}]
        assert bundle.users == [{"name": "Asha Rao"}]
        assert bundle.mentorships == [{"mentorName": "Dr. Mehta"}]

    @pytest.mark.asyncio
    async def test_failed_collections_should_be_logged(
        self, collections: CollectionSettings, caplog: pytest.LogCaptureFixture
    ) -> None:
        await ContextAggregator(FakeGateway(FULL_DATA, {"users", "events"}), collections).gather()

        assert "Collections defaulted to empty" in caplog.text
        assert "users" in caplog.text and "events" in caplog.text

    @pytest.mark.asyncio
    async def test_reads_should_run_concurrently(self, collections: CollectionSettings) -> None:
        started: list[str] = []
        all_started = asyncio.Event()

        class BarrierGateway:
            async def fetch(self, collection: str) -> FetchResult:
                started.append(collection)
                if len(started) == 6:
                    all_started.set()
                # Only completes if all six reads are in flight together
                await asyncio.wait_for(all_started.wait(), timeout=1)
                return FetchResult(collection=collection)

        bundle = await ContextAggregator(BarrierGateway(), collections).gather()

        assert len(started) == 6
        assert bundle == ContextBundle()


class TestGatherAgainstStore:
    """Aggregation over a real SQLite record store."""

    @pytest.mark.asyncio
    async def test_one_failing_collection_keeps_other_five(
        self, record_store: RecordStoreClient, collections: CollectionSettings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async with record_store.session() as session:
            async with session.begin():
                for collection, documents in FULL_DATA.items():
                    await record_crud.add_many(session, collection, documents)

        original = record_crud.get_by_collection

        async def flaky_get_by_collection(session, collection):
            if collection == "internships":
                raise RuntimeError("collection unavailable")
            return await original(session, collection)

        monkeypatch.setattr(record_crud, "get_by_collection", flaky_get_by_collection)

        bundle = await ContextAggregator(RecordStoreGateway(record_store), collections).gather()

        assert bundle.internships == []
        assert [e["title"] for e in bundle.events] == ["Reunion"]
        assert [f["title"] for f in bundle.fundraising] == ["Library Fund"]
        assert [n["title"] for n in bundle.notifications] == ["Portal update"]
        assert [u["name"] for u in bundle.users] == ["Asha Rao"]
        assert [m["mentorName"] for m in bundle.mentorships] == ["Dr. Mehta"]
        assert all("id" in record for record in bundle.events + bundle.users)
