"""
Read-only view models produced by partnerhub.selectors.

These are denormalized: a catalog item carries its host partner, a summary
carries every related row. Nothing here is ever written back to the store.
"""

from pydantic import BaseModel, Field

from partnerhub.models.records import (
    CountryCoordinator,
    EducationalInstitution,
    InstitutionTeacher,
    Partner,
    PartnerUser,
    Program,
    ProgramActivity,
    ProgramInvitation,
    ProgramPartner,
    ProgramProject,
    ProgramProjectTemplate,
    ProgramResource,
)


# ---------------------------------------------------------------------------
# Program catalog
# ---------------------------------------------------------------------------

class CatalogMetrics(BaseModel):
    """Participation numbers shown on a catalog card."""

    students: int = Field(default=0, description="Sum of student_count over the program's institutions.")
    teachers: int = 0
    institutions: int = 0
    active_projects: int = 0
    completed_projects: int = 0
    countries: int = Field(default=0, description="Distinct institution countries.")


class ProgramCatalogItem(BaseModel):
    program_id: str
    display_title: str
    name: str
    marketing_tagline: str | None = None
    description: str = ""
    status: str
    is_public: bool
    cover_image_url: str | None = None
    brand_color: str | None = None
    start_month_label: str | None = Field(default=None, examples=["Sep 2025"])
    host_partner: Partner | None = None
    supporting_partner: Partner | None = None
    metrics: CatalogMetrics = Field(default_factory=CatalogMetrics)


# ---------------------------------------------------------------------------
# Program summaries and partner roll-ups
# ---------------------------------------------------------------------------

class CoPartnerEntry(BaseModel):
    relationship: ProgramPartner
    partner: Partner | None = None


class ProgramSummaryMetrics(BaseModel):
    student_count: int = 0
    institution_count: int = 0
    active_institution_count: int = 0
    teacher_count: int = 0
    coordinator_count: int = 0
    co_partner_count: int = Field(default=0, description="Accepted co-partner relationships only.")
    project_count: int = 0
    pending_invitations: int = 0
    countries: list[str] = Field(default_factory=list)


class ProgramSummary(BaseModel):
    program: Program
    co_partners: list[CoPartnerEntry] = Field(default_factory=list)
    coordinators: list[CountryCoordinator] = Field(default_factory=list)
    institutions: list[EducationalInstitution] = Field(default_factory=list)
    teachers: list[InstitutionTeacher] = Field(default_factory=list)
    projects: list[ProgramProject] = Field(default_factory=list)
    templates: list[ProgramProjectTemplate] = Field(default_factory=list)
    invitations: list[ProgramInvitation] = Field(default_factory=list)
    activities: list[ProgramActivity] = Field(default_factory=list)
    metrics: ProgramSummaryMetrics = Field(default_factory=ProgramSummaryMetrics)


class PartnerProgramMetrics(BaseModel):
    total_programs: int = 0
    active_programs: int = 0
    co_partners: int = 0
    coordinators: int = 0
    institutions: int = 0
    teachers: int = 0
    students: int = 0
    projects: int = 0
    pending_invitations: int = 0
    country_count: int = 0


# ---------------------------------------------------------------------------
# Role contexts
# ---------------------------------------------------------------------------

class UserSession(BaseModel):
    """Who is asking. Only email and organization drive any lookup."""

    email: str = ""
    role: str = "partner"
    organization: str | None = None
    name: str | None = None


class PartnerContext(BaseModel):
    partner_id: str | None = None
    partner: Partner | None = None
    partner_user: PartnerUser | None = None


class TeacherContext(BaseModel):
    teacher_email: str = ""
    memberships: list[InstitutionTeacher] = Field(default_factory=list)
    membership_ids: list[str] = Field(default_factory=list)
    program_ids: list[str] = Field(default_factory=list)
    program_summaries: list[ProgramSummary] = Field(default_factory=list)
    programs_by_id: dict[str, ProgramSummary] = Field(default_factory=dict)
    institutions: list[EducationalInstitution] = Field(default_factory=list)


class CoordinatorContext(BaseModel):
    coordinator_email: str = ""
    coordinators: list[CountryCoordinator] = Field(default_factory=list)
    program_ids: list[str] = Field(default_factory=list)
    programs: list[ProgramCatalogItem] = Field(default_factory=list)
    institutions: list[EducationalInstitution] = Field(default_factory=list)


class SchoolContext(BaseModel):
    contact_email: str = ""
    institutions: list[EducationalInstitution] = Field(default_factory=list)
    programs: list[ProgramCatalogItem] = Field(default_factory=list)
    teachers: list[InstitutionTeacher] = Field(default_factory=list)


class ParentContact(BaseModel):
    name: str
    email: str
    role: str
    is_primary: bool = False


class ParentOrganizationPreset(BaseModel):
    name: str
    website: str
    short_description: str
    contacts: list[ParentContact] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    sdg_tags: list[str] = Field(default_factory=list)
    thematic_tags: list[str] = Field(default_factory=list)
    mission: str = ""


class ParentContext(BaseModel):
    organization: str | None = None
    network: str
    preset: ParentOrganizationPreset
    partners: list[Partner] = Field(default_factory=list)
    partner_ids: list[str] = Field(default_factory=list)
    programs: list[ProgramCatalogItem] = Field(default_factory=list)
    resources: list[ProgramResource] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Store administration
# ---------------------------------------------------------------------------

class StoreStatus(BaseModel):
    seeded: bool = Field(description="Whether this call actually wrote the sample dataset.")
    seeded_at: str | None = None
    counts: dict[str, int] = Field(default_factory=dict)
