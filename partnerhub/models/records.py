"""
PartnerHub record models (pydantic).

One model per stored table. Every record is an open shape: fields not
declared here are kept as extras so older or richer snapshots round-trip
without loss. Timestamps are ISO-8601 strings, not datetimes, so a record
with a missing or unparseable timestamp still loads and simply sorts last.

The PrototypeDatabase model at the bottom is the whole persisted document:
every table as a top-level list, plus a small metadata block.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_VERSION = 1


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TableName(str, Enum):
    """Names of the stored tables, as they appear in the snapshot."""

    partners = "partners"
    partner_users = "partner_users"
    programs = "programs"
    program_partners = "program_partners"
    coordinators = "coordinators"
    institutions = "institutions"
    institution_teachers = "institution_teachers"
    program_projects = "program_projects"
    program_templates = "program_templates"
    resources = "resources"
    invitations = "invitations"
    activities = "activities"


class AvailabilityScope(str, Enum):
    """Who, besides the owner, may see a resource."""

    organization = "organization"
    all_partners = "all_partners"
    specific_partners = "specific_partners"


class OwnerRole(str, Enum):
    partner = "partner"
    parent = "parent"


# ---------------------------------------------------------------------------
# Base record
# ---------------------------------------------------------------------------

class Record(BaseModel):
    """Common shape of every stored row: an immutable id plus timestamps."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    id: str = Field(description="Unique within its table. Never changes.", examples=["program-build-the-change"])
    created_at: str | None = Field(default=None, description="ISO-8601 creation time.")
    updated_at: str | None = Field(default=None, description="ISO-8601 time of the last update.")


# ---------------------------------------------------------------------------
# Organizations and people
# ---------------------------------------------------------------------------

class Partner(Record):
    """An organization offering programs.

    network_id and organization_level place the partner inside a parent
    network: country-level members of a network are what a parent
    organization administrator gets to see."""

    organization_name: str = Field(examples=["Save the Children Italy"])
    organization_type: Literal["ngo", "government", "school_network", "commercial", "other"] = "ngo"
    description: str = ""
    mission: str = ""
    website: str | None = None
    contact_email: str = ""
    logo: str | None = None
    country: str | None = Field(default=None, description="ISO country code of the head office.")
    countries: list[str] = Field(default_factory=list, description="ISO codes of countries of operation.")
    languages: list[str] = Field(default_factory=list)
    sdg_focus: list[str] = Field(default_factory=list)
    is_active: bool = True
    verification_status: Literal["pending", "verified", "rejected"] = "pending"
    network_id: str | None = Field(
        default=None,
        description="Parent network this partner belongs to (e.g. 'stc', 'unicef').",
        examples=["stc"],
    )
    organization_level: Literal["country", "international"] = "country"


class PartnerUser(Record):
    partner_id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: Literal["admin", "coordinator", "collaborator"] = "collaborator"
    has_accepted_terms: bool = False
    two_factor_enabled: bool = False
    last_login_at: str | None = None
    is_active: bool = True


class CountryCoordinator(Record):
    """An email-identified person who runs one program in one country."""

    program_id: str
    user_id: str | None = None
    country: str = Field(examples=["IT"])
    region: str | None = None
    email: str
    first_name: str = ""
    last_name: str = ""
    phone_number: str | None = None
    status: Literal["invited", "active", "inactive"] = "invited"
    invited_by: str | None = None
    invited_at: str | None = None
    accepted_at: str | None = None


class EducationalInstitution(Record):
    """A school-like entity joined to one program by one coordinator."""

    program_id: str
    coordinator_id: str
    name: str
    type: str = "public_school"
    country: str = ""
    region: str | None = None
    city: str | None = None
    address: str | None = None
    contact_email: str = ""
    principal_name: str | None = None
    student_count: int = Field(default=0, ge=0)
    active_student_count: int | None = None
    teacher_count: int | None = None
    education_levels: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    status: Literal["invited", "active", "inactive", "withdrawn"] = "invited"
    invited_at: str | None = None
    joined_at: str | None = None


class InstitutionTeacher(Record):
    """Teacher membership: links an email to one institution and one program."""

    institution_id: str
    program_id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    subject: str | None = None
    grade_level: str | None = None
    status: Literal["invited", "active", "inactive"] = "invited"
    invited_at: str | None = None
    accepted_at: str | None = None


# ---------------------------------------------------------------------------
# Programs and everything hanging off them
# ---------------------------------------------------------------------------

class Program(Record):
    """A partner-owned program; the join point for most other tables."""

    partner_id: str = Field(description="Owning (host) partner.")
    display_title: str = Field(examples=["Save the Children x LEGO: Build the Change"])
    name: str
    marketing_tagline: str | None = None
    description: str = ""
    supporting_partner_id: str | None = None
    supporting_partner_role: Literal["co_host", "sponsor"] | None = None
    project_types: list[str] = Field(default_factory=list)
    pedagogical_framework: list[str] = Field(default_factory=list)
    learning_goals: str = ""
    target_age_ranges: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    countries_in_scope: list[str] = Field(default_factory=list)
    sdg_focus: list[int] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None
    program_url: str | None = None
    brand_color: str | None = None
    logo: str | None = None
    hero_image_url: str | None = None
    status: Literal["draft", "active", "completed", "archived"] = "draft"
    is_public: bool = True
    created_by: str | None = None


class ProgramPartner(Record):
    """Co-partner relationship between a program and another partner."""

    program_id: str
    partner_id: str
    role: Literal["host", "co_host", "sponsor", "advisor", "supporter"] = "supporter"
    permissions: dict[str, bool] = Field(default_factory=dict)
    invited_by: str | None = None
    invited_at: str | None = None
    status: Literal["invited", "accepted", "declined", "removed"] = "invited"
    accepted_at: str | None = None


class ProgramProject(Record):
    program_id: str
    project_id: str | None = None
    title: str | None = None
    created_by_type: Literal["partner", "coordinator", "teacher"] = "teacher"
    created_by_id: str | None = None
    participant_ids: list[str] = Field(default_factory=list)
    associated_co_partner_id: str | None = None
    status: Literal["draft", "active", "completed", "archived"] = "draft"
    cover_image_url: str | None = None
    template_id: str | None = None


class ProgramProjectTemplate(Record):
    program_id: str
    title: str
    summary: str = ""
    hero_image_url: str | None = None
    estimated_duration_weeks: int | None = None
    recommended_start_month: str | None = None
    subject_focus: list[str] = Field(default_factory=list)
    sdg_alignment: list[int] = Field(default_factory=list)
    language_support: list[str] = Field(default_factory=list)
    project_type: str | None = None
    is_active: bool = True


class ProgramResource(Record):
    """A content item shared with partners.

    Visibility is decided by owner_role, owner_partner_id,
    availability_scope and target_partner_ids; see
    partnerhub.selectors.resources."""

    title: str
    description: str = ""
    type: Literal["document", "video", "website", "presentation", "book", "game", "quiz"] = "document"
    language: str = "en"
    target_audience: list[str] = Field(default_factory=list)
    sdg_alignment: list[int] = Field(default_factory=list)
    crc_alignment: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    is_public: bool = False
    source_type: Literal["file", "url"] = "url"
    source_url: str | None = None
    hero_image_url: str | None = None
    owner_role: OwnerRole = OwnerRole.partner
    owner_organization: str = ""
    owner_partner_id: str | None = None
    created_by: str | None = None
    program_assignment: Literal["all", "specific"] = "all"
    specific_program_ids: list[str] = Field(default_factory=list)
    availability_scope: AvailabilityScope = AvailabilityScope.organization
    target_partner_ids: list[str] = Field(default_factory=list)


class ProgramInvitation(Record):
    program_id: str
    invitation_type: Literal["co_partner", "coordinator", "institution", "teacher"]
    recipient_email: str
    recipient_name: str | None = None
    sent_by: str | None = None
    sent_by_type: Literal["partner", "coordinator"] = "partner"
    custom_message: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    token: str = ""
    expires_at: str | None = None
    status: Literal["pending", "viewed", "accepted", "declined", "expired", "cancelled"] = "pending"
    sent_at: str | None = None
    responded_at: str | None = None
    assigned_country: str | None = None
    assigned_region: str | None = None


class ProgramActivity(Record):
    program_id: str
    type: Literal[
        "co_partner_joined",
        "coordinator_joined",
        "institution_joined",
        "teacher_joined",
        "project_created",
    ]
    actor_name: str = ""
    actor_type: Literal["partner", "coordinator", "teacher"] = "partner"
    description: str = ""
    timestamp: str | None = None


# ---------------------------------------------------------------------------
# The persisted document
# ---------------------------------------------------------------------------

class DatabaseMetadata(BaseModel):
    version: int = SCHEMA_VERSION
    seeded_at: str | None = None


class PrototypeDatabase(BaseModel):
    """The whole snapshot. One list per table, plus metadata."""

    partners: list[Partner] = Field(default_factory=list)
    partner_users: list[PartnerUser] = Field(default_factory=list)
    programs: list[Program] = Field(default_factory=list)
    program_partners: list[ProgramPartner] = Field(default_factory=list)
    coordinators: list[CountryCoordinator] = Field(default_factory=list)
    institutions: list[EducationalInstitution] = Field(default_factory=list)
    institution_teachers: list[InstitutionTeacher] = Field(default_factory=list)
    program_projects: list[ProgramProject] = Field(default_factory=list)
    program_templates: list[ProgramProjectTemplate] = Field(default_factory=list)
    resources: list[ProgramResource] = Field(default_factory=list)
    invitations: list[ProgramInvitation] = Field(default_factory=list)
    activities: list[ProgramActivity] = Field(default_factory=list)
    metadata: DatabaseMetadata = Field(default_factory=DatabaseMetadata)

    def table(self, name: TableName | str) -> list[Record]:
        return getattr(self, TableName(name).value)

    def is_empty(self) -> bool:
        return all(not self.table(name) for name in TableName)

    def counts(self) -> dict[str, int]:
        return {name.value: len(self.table(name)) for name in TableName}


# Table name -> record model, used to validate generic create/update input.
RECORD_MODELS: dict[TableName, type[Record]] = {
    TableName.partners: Partner,
    TableName.partner_users: PartnerUser,
    TableName.programs: Program,
    TableName.program_partners: ProgramPartner,
    TableName.coordinators: CountryCoordinator,
    TableName.institutions: EducationalInstitution,
    TableName.institution_teachers: InstitutionTeacher,
    TableName.program_projects: ProgramProject,
    TableName.program_templates: ProgramProjectTemplate,
    TableName.resources: ProgramResource,
    TableName.invitations: ProgramInvitation,
    TableName.activities: ProgramActivity,
}
