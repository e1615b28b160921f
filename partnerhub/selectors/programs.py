"""
Program selectors: catalog cards, per-program summaries, partner roll-ups.

Every function takes the loaded snapshot (or None for "not loaded yet") and
returns fresh view models. Rows whose foreign keys don't resolve are left
out or reported as None; nothing here raises on bad references.
"""

from collections.abc import Callable, Iterable

from partnerhub.models.records import Program, PrototypeDatabase, TableName
from partnerhub.models.views import (
    CatalogMetrics,
    CoPartnerEntry,
    PartnerProgramMetrics,
    ProgramCatalogItem,
    ProgramSummary,
    ProgramSummaryMetrics,
)
from partnerhub.selectors.utils import month_label, parse_timestamp


def _or_empty(db: PrototypeDatabase | None) -> PrototypeDatabase:
    return db if db is not None else PrototypeDatabase()


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def _catalog_metrics(db: PrototypeDatabase, program_id: str) -> CatalogMetrics:
    institutions = [i for i in db.institutions if i.program_id == program_id]
    teachers = [t for t in db.institution_teachers if t.program_id == program_id]
    projects = [p for p in db.program_projects if p.program_id == program_id]

    return CatalogMetrics(
        students=sum(i.student_count or 0 for i in institutions),
        teachers=len(teachers),
        institutions=len(institutions),
        active_projects=sum(1 for p in projects if p.status == "active"),
        completed_projects=sum(1 for p in projects if p.status == "completed"),
        countries=len({i.country for i in institutions if i.country}),
    )


def build_program_catalog(
    db: PrototypeDatabase | None,
    include_private: bool = False,
) -> list[ProgramCatalogItem]:
    """One catalog item per program, in table order.

    Private programs are skipped unless include_private is set (partner and
    coordinator views see their own private programs; discovery does not).
    """
    db = _or_empty(db)
    partners = {p.id: p for p in db.partners}

    items = []
    for program in db.programs:
        if not program.is_public and not include_private:
            continue
        items.append(ProgramCatalogItem(
            program_id=program.id,
            display_title=program.display_title,
            name=program.name,
            marketing_tagline=program.marketing_tagline,
            description=program.description,
            status=program.status,
            is_public=program.is_public,
            cover_image_url=program.hero_image_url or program.logo,
            brand_color=program.brand_color,
            start_month_label=month_label(program.start_date),
            host_partner=partners.get(program.partner_id),
            supporting_partner=partners.get(program.supporting_partner_id) if program.supporting_partner_id else None,
            metrics=_catalog_metrics(db, program.id),
        ))
    return items


# ---------------------------------------------------------------------------
# Programs for a partner
# ---------------------------------------------------------------------------

def _dedupe_newest_first(programs: Iterable[Program]) -> list[Program]:
    by_id: dict[str, Program] = {}
    for program in programs:
        by_id[program.id] = program
    return sorted(by_id.values(), key=lambda p: parse_timestamp(p.created_at), reverse=True)


def get_programs_for_partner(
    db: PrototypeDatabase | None,
    partner_id: str,
    include_related: bool = False,
) -> list[Program]:
    """Programs the partner owns, plus co-partnered ones if include_related."""
    db = _or_empty(db)
    owned = [p for p in db.programs if p.partner_id == partner_id]
    if not include_related:
        return _dedupe_newest_first(owned)

    related_ids = {r.program_id for r in db.program_partners if r.partner_id == partner_id}
    related = [p for p in db.programs if p.id in related_ids]
    return _dedupe_newest_first([*owned, *related])


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

def _summary_metrics(summary: ProgramSummary) -> ProgramSummaryMetrics:
    countries = set(summary.program.countries_in_scope)
    countries.update(c.country for c in summary.coordinators if c.country)
    countries.update(i.country for i in summary.institutions if i.country)

    return ProgramSummaryMetrics(
        student_count=sum(i.student_count or 0 for i in summary.institutions),
        institution_count=len(summary.institutions),
        active_institution_count=sum(1 for i in summary.institutions if i.status == "active"),
        teacher_count=len(summary.teachers),
        coordinator_count=len(summary.coordinators),
        co_partner_count=sum(1 for e in summary.co_partners if e.relationship.status == "accepted"),
        project_count=len(summary.projects),
        pending_invitations=sum(1 for i in summary.invitations if i.status == "pending"),
        countries=sorted(countries),
    )


def build_program_summary(db: PrototypeDatabase | None, program: Program) -> ProgramSummary:
    db = _or_empty(db)
    partners = {p.id: p for p in db.partners}
    pid = program.id

    summary = ProgramSummary(
        program=program,
        co_partners=[
            CoPartnerEntry(relationship=r, partner=partners.get(r.partner_id))
            for r in db.program_partners if r.program_id == pid
        ],
        coordinators=[c for c in db.coordinators if c.program_id == pid],
        institutions=[i for i in db.institutions if i.program_id == pid],
        teachers=[t for t in db.institution_teachers if t.program_id == pid],
        projects=[p for p in db.program_projects if p.program_id == pid],
        templates=[t for t in db.program_templates if t.program_id == pid],
        invitations=[i for i in db.invitations if i.program_id == pid],
        activities=[a for a in db.activities if a.program_id == pid],
    )
    summary.metrics = _summary_metrics(summary)
    return summary


def build_program_summaries_for_partner(
    db: PrototypeDatabase | None,
    partner_id: str,
    include_related: bool = False,
) -> list[ProgramSummary]:
    return [
        build_program_summary(db, program)
        for program in get_programs_for_partner(db, partner_id, include_related)
    ]


def find_program_summary_by_id(db: PrototypeDatabase | None, program_id: str) -> ProgramSummary | None:
    db = _or_empty(db)
    for program in db.programs:
        if program.id == program_id:
            return build_program_summary(db, program)
    return None


def aggregate_program_metrics(summaries: list[ProgramSummary]) -> PartnerProgramMetrics:
    """Roll a partner's program summaries up into one set of totals."""
    totals = PartnerProgramMetrics(total_programs=len(summaries))
    countries: set[str] = set()

    for summary in summaries:
        m = summary.metrics
        totals.co_partners += m.co_partner_count
        totals.coordinators += m.coordinator_count
        totals.institutions += m.institution_count
        totals.teachers += m.teacher_count
        totals.students += m.student_count
        totals.projects += m.project_count
        totals.pending_invitations += m.pending_invitations
        countries.update(m.countries)
        if summary.program.status == "active":
            totals.active_programs += 1

    totals.country_count = len(countries)
    return totals


# ---------------------------------------------------------------------------
# Cascade delete
# ---------------------------------------------------------------------------

# Tables whose rows carry a program_id and go away with their program.
_PROGRAM_CHILD_TABLES = (
    TableName.program_partners,
    TableName.coordinators,
    TableName.institutions,
    TableName.institution_teachers,
    TableName.program_projects,
    TableName.program_templates,
    TableName.invitations,
    TableName.activities,
)


def cascade_delete_program(
    db: PrototypeDatabase | None,
    program_id: str,
    delete_record: Callable[[TableName, str], bool],
) -> int:
    """Delete a program and every row that references it.

    Ids are collected from the given snapshot first, then deleted one by one
    through delete_record. Returns how many rows were actually removed.
    """
    if db is None:
        return 0

    doomed = [
        (table, row.id)
        for table in _PROGRAM_CHILD_TABLES
        for row in db.table(table)
        if getattr(row, "program_id", None) == program_id
    ]
    doomed.append((TableName.programs, program_id))

    return sum(1 for table, record_id in doomed if delete_record(table, record_id))
