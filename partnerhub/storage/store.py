"""
PrototypeStore: the persisted snapshot of every PartnerHub table.

The whole database is one JSON document under one key in a storage backend.
Every write reads the current document, changes it in memory and writes the
whole thing back. Nothing coordinates two processes writing the same key:
the later write wins in full.

Reads fail soft. A missing, malformed, wrongly shaped or wrong-version
document loads as an empty database and the reason is logged; callers never
see the error. Lookups by id report a miss with None/False instead of
raising.
"""

import json
import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ValidationError

from partnerhub.config import DEFAULT_STORAGE_KEY
from partnerhub.models.records import (
    RECORD_MODELS,
    SCHEMA_VERSION,
    PrototypeDatabase,
    Record,
    TableName,
)
from partnerhub.storage.backends import StorageBackend
from partnerhub.storage.seeds import build_seed_database

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]
Clock = Callable[[], datetime]


class StoreError(Exception):
    """The backend refused a write."""


class UnknownTableError(KeyError):
    """Table name is not part of the schema."""


class DuplicateRecordError(ValueError):
    """A create call supplied an id that already exists in the table."""


@dataclass
class SeedResult:
    database: PrototypeDatabase
    seeded: bool


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def _table(name: TableName | str) -> TableName:
    try:
        return TableName(name)
    except ValueError:
        raise UnknownTableError(name) from None


class PrototypeStore:
    """Owner of one snapshot document.

    Construct one per application and hand it to whoever needs it; the
    backend decides where the document actually lives.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.backend = backend
        self.key = key
        self._clock = clock or _utc_now
        self._new_id = id_factory or _new_id
        self._listeners: list[ChangeListener] = []
        self._seen_revision = backend.revision(key)

    # -- helpers ------------------------------------------------------------

    def _now(self) -> str:
        return self._clock().isoformat()

    def _persist(self, db: PrototypeDatabase) -> None:
        try:
            self.backend.write(self.key, db.model_dump_json())
        except OSError as exc:
            logger.exception("Failed to persist prototype database under '%s'", self.key)
            raise StoreError(f"could not write '{self.key}'") from exc
        self._seen_revision = self.backend.revision(self.key)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.key)

    # -- reading ------------------------------------------------------------

    def load(self) -> PrototypeDatabase:
        """Return the persisted snapshot, or an empty one if it can't be used."""
        # Revision before content: a write racing this read costs at most one
        # extra reload on the next poll, never a missed one.
        try:
            self._seen_revision = self.backend.revision(self.key)
            raw = self.backend.read(self.key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Prototype database under '%s' could not be read: %s", self.key, exc)
            return PrototypeDatabase()
        if not raw:
            return PrototypeDatabase()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Prototype database under '%s' is not valid JSON: %s", self.key, exc)
            return PrototypeDatabase()

        if not isinstance(data, dict):
            logger.warning("Prototype database under '%s' is not an object", self.key)
            return PrototypeDatabase()

        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            logger.warning("Prototype database under '%s' has malformed metadata; starting empty", self.key)
            return PrototypeDatabase()

        version = metadata.get("version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            logger.warning(
                "Prototype database under '%s' has schema version %s, expected %s; starting empty",
                self.key, version, SCHEMA_VERSION,
            )
            return PrototypeDatabase()

        try:
            return PrototypeDatabase.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "Prototype database under '%s' does not match the schema (%d errors); starting empty",
                self.key, exc.error_count(),
            )
            return PrototypeDatabase()

    def get_all(self, table: TableName | str) -> list[Record]:
        return self.load().table(_table(table))

    def get_by_id(self, table: TableName | str, record_id: str) -> Record | None:
        for record in self.get_all(table):
            if record.id == record_id:
                return record
        return None

    # -- writing ------------------------------------------------------------

    def create(self, table: TableName | str, data: Mapping[str, Any] | BaseModel) -> Record:
        """Append a new record and persist. Returns the stored record."""
        name = _table(table)
        payload = data.model_dump() if isinstance(data, BaseModel) else dict(data)

        db = self.load()
        rows = db.table(name)

        record_id = payload.get("id")
        if record_id:
            if any(row.id == record_id for row in rows):
                raise DuplicateRecordError(f"{name.value} already has a record with id '{record_id}'")
        else:
            record_id = self._new_id()
            while any(row.id == record_id for row in rows):
                record_id = self._new_id()

        now = self._now()
        payload["id"] = record_id
        if not payload.get("created_at"):
            payload["created_at"] = now
        payload["updated_at"] = now

        record = RECORD_MODELS[name].model_validate(payload)
        rows.append(record)
        self._persist(db)
        logger.debug("Created %s/%s", name.value, record_id)
        return record

    def update(self, table: TableName | str, record_id: str, fields: Mapping[str, Any]) -> Record | None:
        """Merge fields into an existing record. None if the id isn't there."""
        name = _table(table)
        db = self.load()
        rows = db.table(name)

        for index, current in enumerate(rows):
            if current.id == record_id:
                break
        else:
            return None

        changes = {k: v for k, v in fields.items() if k not in ("id", "created_at")}
        merged = {**current.model_dump(), **changes, "id": record_id, "updated_at": self._now()}
        record = RECORD_MODELS[name].model_validate(merged)

        rows[index] = record
        self._persist(db)
        return record

    def delete(self, table: TableName | str, record_id: str) -> bool:
        """Remove a record by id. True if something was removed."""
        name = _table(table)
        db = self.load()
        rows = db.table(name)
        kept = [row for row in rows if row.id != record_id]
        if len(kept) == len(rows):
            return False

        setattr(db, name.value, kept)
        self._persist(db)
        return True

    def reset(self) -> None:
        """Throw away every table."""
        self._persist(PrototypeDatabase())
        logger.info("Prototype database '%s' reset", self.key)

    def seed(self, force: bool = False) -> SeedResult:
        """Fill an empty store with the sample dataset.

        Does nothing when the store already holds records, unless force is
        set, in which case the snapshot is replaced outright.
        """
        current = self.load()
        if not force and not current.is_empty():
            return SeedResult(database=current, seeded=False)

        db = build_seed_database(self._now())
        self._persist(db)
        logger.info("Seeded prototype database '%s' (force=%s)", self.key, force)
        return SeedResult(database=db, seeded=True)

    def touch_seed_metadata(self) -> None:
        db = self.load()
        db.metadata.seeded_at = self._now()
        self._persist(db)

    # -- change notification ------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call listener(key) after every write. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def poll_external_change(self) -> bool:
        """Notify listeners if someone else wrote the document since we last looked.

        Only a hint to reload; it says nothing about what changed.
        """
        revision = self.backend.revision(self.key)
        if revision == self._seen_revision:
            return False
        self._seen_revision = revision
        logger.debug("Prototype database '%s' changed outside this store", self.key)
        self._notify()
        return True
