"""Tests for DatabaseView: lifecycle, reload on change, bound lookups."""

from partnerhub.storage.store import PrototypeStore
from partnerhub.storage.view import DatabaseView


class TestLifecycle:

    def test_open_seeds_an_empty_store(self, view):
        assert view.ready
        assert view.database.metadata.seeded_at is not None
        assert len(view.database.programs) == 4

    def test_open_without_seed(self, store):
        view = DatabaseView(store).open(seed=False)
        assert view.ready
        assert view.database.is_empty()
        view.close()

    def test_not_ready_before_open(self, store):
        assert not DatabaseView(store).ready

    def test_reset_restores_the_sample_data(self, view):
        view.delete_record("programs", "program-climate-voices")
        view.create_record("partners", {"organization_name": "Green Schools Trust"})
        view.reset()
        assert len(view.database.programs) == 4
        assert len(view.database.partners) == 7


class TestReload:

    def test_writes_are_visible_immediately(self, view):
        created = view.create_record("partners", {"organization_name": "Green Schools Trust"})
        assert created.id in [p.id for p in view.database.partners]

        view.update_record("partners", created.id, {"country": "IE"})
        assert next(p for p in view.database.partners if p.id == created.id).country == "IE"

        assert view.delete_record("partners", created.id) is True
        assert created.id not in [p.id for p in view.database.partners]

    def test_second_view_sees_first_views_writes(self, view, store):
        other = DatabaseView(store).open()
        view.create_record("partners", {"id": "partner-green", "organization_name": "Green Schools Trust"})
        assert "partner-green" in [p.id for p in other.database.partners]
        other.close()

    def test_closed_view_stops_reloading(self, view, store):
        other = DatabaseView(store).open()
        other.close()
        view.create_record("partners", {"id": "partner-green", "organization_name": "Green Schools Trust"})
        assert "partner-green" not in [p.id for p in other.database.partners]

    def test_sync_picks_up_another_process(self, view, backend, store):
        outsider = PrototypeStore(backend, key=store.key)
        outsider.create("partners", {"id": "partner-remote", "organization_name": "Remote Office"})

        assert view.sync() is True
        assert "partner-remote" in [p.id for p in view.database.partners]
        assert view.sync() is False


class TestBoundLookups:

    def test_programs_for_partner(self, view):
        ids = [p.id for p in view.programs_for_partner("partner-unicef-england")]
        assert ids == ["program-climate-voices"]

    def test_co_partners(self, view):
        pairs = view.co_partners_for_program("program-build-the-change")
        assert [(r.id, p.id) for r, p in pairs] == [("pp-build-lego", "partner-lego-foundation")]

    def test_per_program_tables(self, view):
        pid = "program-climate-voices"
        assert [c.id for c in view.coordinators_for_program(pid)] == ["coord-gb-sarah", "coord-dk-mads"]
        assert [i.id for i in view.institutions_for_program(pid)] == ["inst-manchester-academy", "inst-aarhus-skole"]
        assert [t.id for t in view.teachers_for_program(pid)] == ["teacher-emily-manchester", "teacher-freja-aarhus"]
        assert [t.id for t in view.templates_for_program(pid)] == ["template-climate-report"]

    def test_invitations_filtered_by_type(self, view):
        pid = "program-climate-voices"
        assert len(view.invitations_for_program(pid)) == 2
        assert [i.id for i in view.invitations_for_program(pid, "institution")] == ["invite-inst-aarhus"]
        assert view.invitations_for_program(pid, "teacher") == []

    def test_unknown_program(self, view):
        assert view.coordinators_for_program("program-nope") == []
        assert view.co_partners_for_program("program-nope") == []
