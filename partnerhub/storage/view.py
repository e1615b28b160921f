"""
DatabaseView: an in-memory copy of the store for one consumer.

Opening the view seeds the store if it is empty and loads the snapshot.
Writes go through the store; the view reloads whenever the store reports a
change, whether the change came from this view, another view on the same
store, or (via sync) another process writing the same document.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from partnerhub.models.records import (
    CountryCoordinator,
    EducationalInstitution,
    InstitutionTeacher,
    Partner,
    Program,
    ProgramInvitation,
    ProgramPartner,
    ProgramProjectTemplate,
    PrototypeDatabase,
    Record,
    TableName,
)
from partnerhub.storage.store import PrototypeStore


class DatabaseView:

    def __init__(self, store: PrototypeStore) -> None:
        self.store = store
        self.database: PrototypeDatabase | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def ready(self) -> bool:
        return self.database is not None

    # -- lifecycle ----------------------------------------------------------

    def open(self, seed: bool = True) -> "DatabaseView":
        if seed:
            self.store.seed()
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self._on_change)
        self.refresh()
        return self

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self, key: str) -> None:
        if key != self.store.key:
            return
        self.refresh()

    def refresh(self) -> None:
        self.database = self.store.load()

    def sync(self) -> bool:
        """Pick up writes made by other processes. True if a reload happened."""
        return self.store.poll_external_change()

    def reset(self) -> None:
        self.store.reset()
        self.store.seed(force=True)
        self.refresh()

    # -- writes -------------------------------------------------------------
    # The store notifies after each write, which triggers refresh() through
    # the subscription. A delete that finds nothing writes nothing.

    def create_record(self, table: TableName | str, data: Mapping[str, Any] | BaseModel) -> Record:
        return self.store.create(table, data)

    def update_record(self, table: TableName | str, record_id: str, fields: Mapping[str, Any]) -> Record | None:
        return self.store.update(table, record_id, fields)

    def delete_record(self, table: TableName | str, record_id: str) -> bool:
        return self.store.delete(table, record_id)

    # -- bound lookups ------------------------------------------------------

    def _db(self) -> PrototypeDatabase:
        return self.database if self.database is not None else PrototypeDatabase()

    def programs_for_partner(self, partner_id: str) -> list[Program]:
        return [p for p in self._db().programs if p.partner_id == partner_id]

    def co_partners_for_program(self, program_id: str) -> list[tuple[ProgramPartner, Partner | None]]:
        db = self._db()
        partners = {p.id: p for p in db.partners}
        return [
            (relationship, partners.get(relationship.partner_id))
            for relationship in db.program_partners
            if relationship.program_id == program_id
        ]

    def coordinators_for_program(self, program_id: str) -> list[CountryCoordinator]:
        return [c for c in self._db().coordinators if c.program_id == program_id]

    def institutions_for_program(self, program_id: str) -> list[EducationalInstitution]:
        return [i for i in self._db().institutions if i.program_id == program_id]

    def teachers_for_program(self, program_id: str) -> list[InstitutionTeacher]:
        return [t for t in self._db().institution_teachers if t.program_id == program_id]

    def templates_for_program(self, program_id: str) -> list[ProgramProjectTemplate]:
        return [t for t in self._db().program_templates if t.program_id == program_id]

    def invitations_for_program(
        self, program_id: str, invitation_type: str | None = None
    ) -> list[ProgramInvitation]:
        return [
            invitation
            for invitation in self._db().invitations
            if invitation.program_id == program_id
            and (invitation_type is None or invitation.invitation_type == invitation_type)
        ]
