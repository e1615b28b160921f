"""
Tests for PrototypeStore.

Covers the store contract:
1. load() never raises; unusable documents load as an empty database
2. create/update/delete report misses with None/False and never touch
   other rows
3. seed() is idempotent unless forced
4. listeners hear about local writes and, via polling, about writes made
   by another store on the same backend
"""

import json

import pytest
from pydantic import ValidationError

from partnerhub.models.records import SCHEMA_VERSION, TableName
from partnerhub.storage.store import (
    DuplicateRecordError,
    PrototypeStore,
    StoreError,
    UnknownTableError,
)

PARTNER = {"organization_name": "Green Schools Trust", "organization_type": "ngo", "country": "IE"}


class TestLoad:

    def test_nothing_persisted_loads_empty(self, store):
        db = store.load()
        assert db.is_empty()
        assert db.metadata.version == SCHEMA_VERSION
        assert db.metadata.seeded_at is None

    def test_malformed_json_loads_empty(self, backend, store):
        backend.write(store.key, "{not json")
        assert store.load().is_empty()

    def test_non_object_document_loads_empty(self, backend, store):
        backend.write(store.key, json.dumps([1, 2, 3]))
        assert store.load().is_empty()

    def test_schema_mismatch_loads_empty(self, backend, store):
        backend.write(store.key, json.dumps({"partners": [{"id": "p1"}]}))  # organization_name missing
        assert store.load().is_empty()

    def test_version_mismatch_loads_empty(self, seeded_store, backend):
        doc = json.loads(backend.read(seeded_store.key))
        doc["metadata"]["version"] = SCHEMA_VERSION + 1
        backend.write(seeded_store.key, json.dumps(doc))
        assert seeded_store.load().is_empty()

    @pytest.mark.parametrize("metadata", ["v1", 5, [1]])
    def test_non_object_metadata_loads_empty(self, backend, store, metadata):
        backend.write(store.key, json.dumps({"partners": [], "metadata": metadata}))
        assert store.load().is_empty()

    def test_store_with_bad_metadata_can_be_reseeded(self, backend, store):
        backend.write(store.key, json.dumps({"metadata": "v1"}))
        assert store.seed().seeded is True
        assert store.load().metadata.version == SCHEMA_VERSION

    def test_missing_tables_default_to_empty_lists(self, backend, store):
        backend.write(store.key, json.dumps({"partners": [{"id": "p1", "organization_name": "A"}]}))
        db = store.load()
        assert [p.id for p in db.partners] == ["p1"]
        assert db.programs == []

    def test_unknown_fields_survive_round_trip(self, store):
        created = store.create("partners", {**PARTNER, "brand_voice": "warm"})
        reloaded = store.get_by_id("partners", created.id)
        assert reloaded.model_dump()["brand_voice"] == "warm"


class TestCreate:

    def test_created_record_appears_exactly_once(self, store):
        record = store.create(TableName.partners, PARTNER)
        ids = [p.id for p in store.load().partners]
        assert ids.count(record.id) == 1

    def test_identical_input_gives_distinct_ids(self, store):
        first = store.create("partners", PARTNER)
        second = store.create("partners", PARTNER)
        assert first.id != second.id
        assert [p.id for p in store.load().partners] == [first.id, second.id]

    def test_insertion_order_is_kept(self, store):
        ids = [store.create("partners", {**PARTNER, "organization_name": f"Org {n}"}).id for n in range(5)]
        assert [p.id for p in store.get_all("partners")] == ids

    def test_timestamps_are_stamped(self, store):
        record = store.create("partners", PARTNER)
        assert record.created_at is not None
        assert record.updated_at is not None

    def test_supplied_unused_id_is_kept(self, store):
        record = store.create("partners", {**PARTNER, "id": "partner-green"})
        assert record.id == "partner-green"

    def test_supplied_duplicate_id_is_rejected(self, store):
        store.create("partners", {**PARTNER, "id": "partner-green"})
        with pytest.raises(DuplicateRecordError):
            store.create("partners", {**PARTNER, "id": "partner-green"})
        assert len(store.get_all("partners")) == 1

    def test_generated_id_never_collides(self, backend):
        ids = iter(["dup", "dup", "fresh"])
        store = PrototypeStore(backend, key="k", id_factory=lambda: next(ids))
        store.create("partners", {**PARTNER, "id": "dup"})
        assert store.create("partners", PARTNER).id == "fresh"

    def test_invalid_record_is_rejected_and_not_persisted(self, store):
        with pytest.raises(ValidationError):
            store.create("programs", {"name": "No owner"})
        assert store.get_all("programs") == []

    def test_unknown_table(self, store):
        with pytest.raises(UnknownTableError):
            store.create("gradebooks", {"title": "x"})


class TestUpdate:

    def test_missing_id_returns_none_and_leaves_table_alone(self, seeded_store):
        before = seeded_store.load().partners
        assert seeded_store.update("partners", "partner-nope", {"organization_name": "X"}) is None
        assert seeded_store.load().partners == before

    def test_fields_are_merged(self, seeded_store):
        updated = seeded_store.update("partners", "partner-unicef-denmark", {"verification_status": "verified"})
        assert updated.verification_status == "verified"
        assert updated.organization_name == "UNICEF Denmark"
        assert seeded_store.get_by_id("partners", "partner-unicef-denmark").verification_status == "verified"

    def test_id_and_created_at_are_immutable(self, seeded_store):
        original = seeded_store.get_by_id("programs", "program-climate-voices")
        updated = seeded_store.update(
            "programs", "program-climate-voices",
            {"id": "hijacked", "created_at": "1999-01-01T00:00:00+00:00", "status": "completed"},
        )
        assert updated.id == "program-climate-voices"
        assert updated.created_at == original.created_at
        assert updated.updated_at != original.updated_at
        assert seeded_store.get_by_id("programs", "hijacked") is None

    def test_row_position_is_kept(self, seeded_store):
        before = [p.id for p in seeded_store.get_all("programs")]
        seeded_store.update("programs", before[1], {"status": "archived"})
        assert [p.id for p in seeded_store.get_all("programs")] == before


class TestDelete:

    def test_missing_id_returns_false(self, seeded_store):
        before = len(seeded_store.get_all("resources"))
        assert seeded_store.delete("resources", "resource-nope") is False
        assert len(seeded_store.get_all("resources")) == before

    def test_existing_id_is_removed(self, seeded_store):
        assert seeded_store.delete("resources", "resource-stc-it-toolkit") is True
        assert seeded_store.get_by_id("resources", "resource-stc-it-toolkit") is None

    def test_missing_id_does_not_write(self, seeded_store, backend):
        revision = backend.revision(seeded_store.key)
        seeded_store.delete("resources", "resource-nope")
        assert backend.revision(seeded_store.key) == revision


class TestWriteFailure:

    def test_failed_write_raises_store_error(self, flaky_backend):
        store = PrototypeStore(flaky_backend, key="k")
        kept = store.create("partners", PARTNER)
        flaky_backend.fail_writes = True

        with pytest.raises(StoreError):
            store.create("partners", {**PARTNER, "organization_name": "Lost"})

        assert [p.id for p in store.load().partners] == [kept.id]

    def test_failed_write_does_not_notify(self, flaky_backend):
        store = PrototypeStore(flaky_backend, key="k")
        record = store.create("partners", PARTNER)
        heard = []
        store.subscribe(heard.append)
        flaky_backend.fail_writes = True

        with pytest.raises(StoreError):
            store.update("partners", record.id, {"country": "GB"})
        with pytest.raises(StoreError):
            store.delete("partners", record.id)

        assert heard == []
        assert store.poll_external_change() is False
        assert store.get_by_id("partners", record.id).country == "IE"


class TestSeedAndReset:

    def test_seed_fills_every_table(self, store):
        result = store.seed()
        assert result.seeded is True
        assert all(count > 0 for count in result.database.counts().values())
        assert result.database.metadata.seeded_at is not None

    def test_seed_twice_is_idempotent(self, store, backend):
        store.seed()
        first = backend.read(store.key)
        result = store.seed()
        assert result.seeded is False
        assert backend.read(store.key) == first

    def test_seed_does_not_touch_a_store_with_data(self, store):
        created = store.create("partners", PARTNER)
        assert store.seed().seeded is False
        assert [p.id for p in store.load().partners] == [created.id]

    def test_forced_seed_replaces_existing_data(self, store):
        created = store.create("partners", PARTNER)
        result = store.seed(force=True)
        assert result.seeded is True
        assert store.get_by_id("partners", created.id) is None
        assert store.get_by_id("partners", "partner-lego-foundation") is not None

    def test_seed_data_is_deterministic_apart_from_seeded_at(self, store):
        first = store.seed(force=True).database
        second = store.seed(force=True).database
        assert first.metadata.seeded_at != second.metadata.seeded_at
        assert first.model_dump(exclude={"metadata"}) == second.model_dump(exclude={"metadata"})

    def test_reset_clears_everything(self, seeded_store):
        seeded_store.reset()
        assert seeded_store.load().is_empty()

    def test_touch_seed_metadata(self, seeded_store):
        before = seeded_store.load().metadata.seeded_at
        seeded_store.touch_seed_metadata()
        assert seeded_store.load().metadata.seeded_at != before


class TestChangeNotification:

    def test_listener_hears_every_write(self, store):
        heard = []
        store.subscribe(heard.append)
        record = store.create("partners", PARTNER)
        store.update("partners", record.id, {"country": "GB"})
        store.delete("partners", record.id)
        assert heard == [store.key, store.key, store.key]

    def test_unsubscribe_stops_notifications(self, store):
        heard = []
        unsubscribe = store.subscribe(heard.append)
        unsubscribe()
        store.create("partners", PARTNER)
        assert heard == []

    def test_own_writes_are_not_external(self, store):
        store.create("partners", PARTNER)
        assert store.poll_external_change() is False

    def test_write_from_another_store_is_detected(self, backend, store):
        other = PrototypeStore(backend, key=store.key)
        heard = []
        store.subscribe(heard.append)

        other.create("partners", PARTNER)

        assert store.poll_external_change() is True
        assert heard == [store.key]
        assert store.poll_external_change() is False

    def test_sequential_writers_see_each_other(self, backend, store):
        other = PrototypeStore(backend, key=store.key)
        mine = store.create("partners", PARTNER)
        theirs = other.create("partners", {**PARTNER, "organization_name": "Other"})
        ids = [p.id for p in store.load().partners]
        assert ids == [mine.id, theirs.id]

    def test_reading_another_stores_write_marks_it_seen(self, backend, store):
        other = PrototypeStore(backend, key=store.key)
        heard = []
        store.subscribe(heard.append)

        other.create("partners", PARTNER)
        assert len(store.load().partners) == 1

        assert store.poll_external_change() is False
        assert heard == []
