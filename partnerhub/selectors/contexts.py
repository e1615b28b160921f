"""
Role contexts: everything one signed-in person's dashboard needs.

Each builder takes the snapshot plus the identifying input (an email or an
organization name) and returns a view model. Empty or unknown inputs give
empty contexts, never errors.
"""

from partnerhub.models.records import EducationalInstitution, PrototypeDatabase
from partnerhub.models.views import (
    CoordinatorContext,
    ParentContext,
    PartnerContext,
    ProgramSummary,
    SchoolContext,
    TeacherContext,
    UserSession,
)
from partnerhub.selectors.network import (
    get_parent_organization_preset,
    get_scoped_parent_partners,
    normalize_organization,
    resolve_parent_network,
)
from partnerhub.selectors.programs import build_program_catalog, find_program_summary_by_id
from partnerhub.selectors.resources import get_resources_for_parent
from partnerhub.selectors.utils import normalize_email


def _unique(values) -> list[str]:
    return list(dict.fromkeys(values))


# ---------------------------------------------------------------------------
# Teacher
# ---------------------------------------------------------------------------

def build_teacher_context(db: PrototypeDatabase | None, email: str | None) -> TeacherContext:
    """Memberships for the email and the programs/institutions they reach.

    Memberships that point at a missing program or institution are kept in
    `memberships` but contribute no summary or institution.
    """
    teacher_email = normalize_email(email)
    if db is None or not teacher_email:
        return TeacherContext(teacher_email=teacher_email)

    memberships = [t for t in db.institution_teachers if normalize_email(t.email) == teacher_email]
    program_ids = _unique(m.program_id for m in memberships)

    summaries: dict[str, ProgramSummary] = {}
    for program_id in program_ids:
        summary = find_program_summary_by_id(db, program_id)
        if summary is not None:
            summaries[summary.program.id] = summary

    institutions_by_id = {i.id: i for i in db.institutions}
    institutions: dict[str, EducationalInstitution] = {}
    for membership in memberships:
        institution = institutions_by_id.get(membership.institution_id)
        if institution is not None:
            institutions[institution.id] = institution

    return TeacherContext(
        teacher_email=teacher_email,
        memberships=memberships,
        membership_ids=[m.id for m in memberships],
        program_ids=program_ids,
        program_summaries=list(summaries.values()),
        programs_by_id=summaries,
        institutions=list(institutions.values()),
    )


# ---------------------------------------------------------------------------
# Coordinator
# ---------------------------------------------------------------------------

def build_coordinator_context(db: PrototypeDatabase | None, email: str | None) -> CoordinatorContext:
    coordinator_email = normalize_email(email)
    if db is None or not coordinator_email:
        return CoordinatorContext(coordinator_email=coordinator_email)

    coordinators = [c for c in db.coordinators if normalize_email(c.email) == coordinator_email]
    coordinator_ids = {c.id for c in coordinators}
    program_ids = _unique(c.program_id for c in coordinators)

    catalog = build_program_catalog(db, include_private=True)
    return CoordinatorContext(
        coordinator_email=coordinator_email,
        coordinators=coordinators,
        program_ids=program_ids,
        programs=[item for item in catalog if item.program_id in program_ids],
        institutions=[i for i in db.institutions if i.coordinator_id in coordinator_ids],
    )


# ---------------------------------------------------------------------------
# School
# ---------------------------------------------------------------------------

def build_school_context(db: PrototypeDatabase | None, email: str | None) -> SchoolContext:
    contact_email = normalize_email(email)
    if db is None or not contact_email:
        return SchoolContext(contact_email=contact_email)

    institutions = [i for i in db.institutions if normalize_email(i.contact_email) == contact_email]
    institution_ids = {i.id for i in institutions}
    program_ids = {i.program_id for i in institutions}

    catalog = build_program_catalog(db, include_private=True)
    return SchoolContext(
        contact_email=contact_email,
        institutions=institutions,
        programs=[item for item in catalog if item.program_id in program_ids],
        teachers=[t for t in db.institution_teachers if t.institution_id in institution_ids],
    )


# ---------------------------------------------------------------------------
# Parent organization
# ---------------------------------------------------------------------------

def build_parent_context(db: PrototypeDatabase | None, organization: str | None) -> ParentContext:
    partners = get_scoped_parent_partners(db, organization)
    partner_ids = [p.id for p in partners]
    catalog = build_program_catalog(db)

    return ParentContext(
        organization=organization,
        network=resolve_parent_network(organization).value,
        preset=get_parent_organization_preset(organization),
        partners=partners,
        partner_ids=partner_ids,
        programs=[
            item for item in catalog
            if item.host_partner is not None and item.host_partner.id in partner_ids
        ],
        resources=get_resources_for_parent(db.resources if db is not None else []),
    )


# ---------------------------------------------------------------------------
# Partner (who is this session acting for?)
# ---------------------------------------------------------------------------

# E-mail domain -> partner id, for sessions without a recognizable organization.
EMAIL_DOMAIN_PARTNERS: dict[str, str] = {
    "lego.com": "partner-lego-foundation",
    "savethechildren.org": "partner-save-the-children",
    "savethechildren.it": "partner-save-the-children-italy",
    "savethechildren.mx": "partner-save-the-children-mexico",
    "unicef.org": "partner-unicef",
    "unicef.org.uk": "partner-unicef-england",
    "unicef.dk": "partner-unicef-denmark",
}


def resolve_partner_id(db: PrototypeDatabase | None, session: UserSession | None) -> str | None:
    """Organization name first, then e-mail domain, then the first partner."""
    if db is None or session is None:
        return None

    partner_ids = {p.id for p in db.partners}

    organization = normalize_organization(session.organization)
    if organization:
        for partner in db.partners:
            if normalize_organization(partner.organization_name) == organization:
                return partner.id

    email = normalize_email(session.email)
    if "@" in email:
        domain = email.rsplit("@", 1)[1]
        partner_id = EMAIL_DOMAIN_PARTNERS.get(domain)
        if partner_id in partner_ids:
            return partner_id

    return db.partners[0].id if db.partners else None


def resolve_partner_context(db: PrototypeDatabase | None, session: UserSession | None) -> PartnerContext:
    partner_id = resolve_partner_id(db, session)
    if db is None or partner_id is None:
        return PartnerContext(partner_id=partner_id)

    email = normalize_email(session.email if session else None)
    partner = next((p for p in db.partners if p.id == partner_id), None)
    partner_user = None
    if email:
        partner_user = next((u for u in db.partner_users if normalize_email(u.email) == email), None)

    return PartnerContext(partner_id=partner_id, partner=partner, partner_user=partner_user)
