"""
Sample dataset for the prototype store.

Everything here is fixed: ids, names, dates. Running the seed twice gives
the same tables; only metadata.seeded_at reflects when it ran. The records
cross-reference each other so every selector has something to join:

  - a corporate foundation (no parent network)
  - a Save the Children style network: international office + Italy, Mexico
  - a UNICEF style network: world office + England, Denmark
  - four programs (one private, one completed) with co-partners,
    coordinators, institutions, teachers, projects and templates
  - resources covering every owner role and availability scope
"""

from partnerhub.models.records import DatabaseMetadata, PrototypeDatabase

SEED_CREATED_AT = "2025-01-15T09:00:00+00:00"
SEED_UPDATED_AT = "2025-06-01T12:00:00+00:00"


def _stamp(rows: list[dict], created: str = SEED_CREATED_AT, updated: str = SEED_UPDATED_AT) -> list[dict]:
    for row in rows:
        row.setdefault("created_at", created)
        row.setdefault("updated_at", updated)
    return rows


# ---------------------------------------------------------------------------
# Partners
# ---------------------------------------------------------------------------

PARTNERS = [
    {
        "id": "partner-lego-foundation",
        "organization_name": "LEGO Foundation",
        "organization_type": "commercial",
        "description": "Learning through play for children everywhere.",
        "mission": "Build a future where learning through play empowers children to become creative, engaged, lifelong learners.",
        "website": "https://learningthroughplay.com",
        "contact_email": "partnerships@lego.com",
        "country": "DK",
        "countries": ["DK", "MX", "IT"],
        "languages": ["en", "da"],
        "sdg_focus": ["4", "17"],
        "verification_status": "verified",
        "organization_level": "international",
    },
    {
        "id": "partner-save-the-children",
        "organization_name": "Save the Children International",
        "organization_type": "ngo",
        "description": "International office coordinating Save the Children country members.",
        "mission": "Protect every child's right to survive, learn and be protected.",
        "website": "https://www.savethechildren.net",
        "contact_email": "partnerships@savethechildren.org",
        "country": "GB",
        "countries": ["IT", "MX"],
        "languages": ["en", "it", "es"],
        "sdg_focus": ["4", "10", "16"],
        "verification_status": "verified",
        "network_id": "stc",
        "organization_level": "international",
    },
    {
        "id": "partner-save-the-children-italy",
        "organization_name": "Save the Children Italy",
        "organization_type": "ngo",
        "description": "Child rights education in Italian schools.",
        "contact_email": "scuole@savethechildren.it",
        "country": "IT",
        "countries": ["IT"],
        "languages": ["it", "en"],
        "sdg_focus": ["4", "16"],
        "verification_status": "verified",
        "network_id": "stc",
    },
    {
        "id": "partner-save-the-children-mexico",
        "organization_name": "Save the Children Mexico",
        "organization_type": "ngo",
        "description": "Community learning programs across Mexican states.",
        "contact_email": "educacion@savethechildren.mx",
        "country": "MX",
        "countries": ["MX"],
        "languages": ["es"],
        "sdg_focus": ["4", "10"],
        "verification_status": "verified",
        "network_id": "stc",
    },
    {
        "id": "partner-unicef",
        "organization_name": "UNICEF World Organization",
        "organization_type": "ngo",
        "description": "Global coordination for UNICEF national committees.",
        "website": "https://www.unicef.org",
        "contact_email": "partners@unicef.org",
        "country": "US",
        "countries": ["GB", "DK"],
        "languages": ["en", "fr", "es"],
        "sdg_focus": ["4", "5", "13"],
        "verification_status": "verified",
        "network_id": "unicef",
        "organization_level": "international",
    },
    {
        "id": "partner-unicef-england",
        "organization_name": "UNICEF England",
        "organization_type": "ngo",
        "description": "Rights Respecting Schools across England.",
        "contact_email": "schools@unicef.org.uk",
        "country": "GB",
        "countries": ["GB"],
        "languages": ["en"],
        "sdg_focus": ["4", "13"],
        "verification_status": "verified",
        "network_id": "unicef",
    },
    {
        "id": "partner-unicef-denmark",
        "organization_name": "UNICEF Denmark",
        "organization_type": "ngo",
        "description": "Climate and rights education with Danish schools.",
        "contact_email": "skole@unicef.dk",
        "country": "DK",
        "countries": ["DK"],
        "languages": ["da", "en"],
        "sdg_focus": ["13"],
        "verification_status": "pending",
        "network_id": "unicef",
    },
]

PARTNER_USERS = [
    {"id": "puser-anna-bianchi", "partner_id": "partner-save-the-children-italy", "email": "anna.bianchi@savethechildren.it",
     "first_name": "Anna", "last_name": "Bianchi", "role": "admin", "has_accepted_terms": True},
    {"id": "puser-james-carter", "partner_id": "partner-unicef-england", "email": "james.carter@unicef.org.uk",
     "first_name": "James", "last_name": "Carter", "role": "admin", "has_accepted_terms": True},
    {"id": "puser-lea-hansen", "partner_id": "partner-lego-foundation", "email": "lea.hansen@lego.com",
     "first_name": "Lea", "last_name": "Hansen", "role": "coordinator", "has_accepted_terms": True},
]


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------

PROGRAMS = [
    {
        "id": "program-build-the-change",
        "partner_id": "partner-save-the-children-italy",
        "display_title": "Save the Children x LEGO: Build the Change",
        "name": "Build the Change",
        "marketing_tagline": "Students design solutions for their own communities.",
        "description": "Classes in Italy and Mexico prototype community improvements and share them with partner classes.",
        "supporting_partner_id": "partner-lego-foundation",
        "supporting_partner_role": "co_host",
        "project_types": ["create_solutions", "collaborative_project"],
        "pedagogical_framework": ["pbl", "design_thinking"],
        "target_age_ranges": ["9-11", "12-14"],
        "languages": ["it", "es", "en"],
        "countries_in_scope": ["IT", "MX"],
        "sdg_focus": [4, 11],
        "start_date": "2025-09-01",
        "end_date": "2026-06-30",
        "brand_color": "#DA291C",
        "hero_image_url": "https://images.example.org/programs/build-the-change.jpg",
        "status": "active",
        "is_public": True,
        "created_by": "puser-anna-bianchi",
        "created_at": "2025-02-01T10:00:00+00:00",
    },
    {
        "id": "program-climate-voices",
        "partner_id": "partner-unicef-england",
        "display_title": "UNICEF Climate Voices",
        "name": "Climate Voices",
        "marketing_tagline": "Young people speaking up on climate.",
        "description": "Secondary classes in England and Denmark research local climate impacts and publish joint reports.",
        "project_types": ["environmental_action", "explore_global_challenges"],
        "pedagogical_framework": ["esd", "coil"],
        "target_age_ranges": ["12-14", "15-18"],
        "languages": ["en", "da"],
        "countries_in_scope": ["GB", "DK"],
        "sdg_focus": [4, 13],
        "start_date": "2025-10-15",
        "end_date": "2026-05-31",
        "brand_color": "#1CABE2",
        "status": "active",
        "is_public": True,
        "created_by": "puser-james-carter",
        "created_at": "2025-03-10T10:00:00+00:00",
    },
    {
        "id": "program-rights-classroom",
        "partner_id": "partner-save-the-children-mexico",
        "display_title": "Rights in the Classroom",
        "name": "Rights in the Classroom",
        "description": "Pilot of child-rights lesson plans with rural schools in Oaxaca.",
        "project_types": ["social_impact"],
        "pedagogical_framework": ["global_citizenship"],
        "target_age_ranges": ["9-11"],
        "languages": ["es"],
        "countries_in_scope": ["MX"],
        "sdg_focus": [4, 16],
        "start_date": "2026-01-12",
        "status": "draft",
        "is_public": False,
        "created_at": "2025-04-20T10:00:00+00:00",
    },
    {
        "id": "program-play-to-learn",
        "partner_id": "partner-lego-foundation",
        "display_title": "Play to Learn Exchange",
        "name": "Play to Learn",
        "description": "Completed exchange of playful maths activities between Danish and Italian primary classes.",
        "project_types": ["cultural_exchange"],
        "pedagogical_framework": ["steam"],
        "target_age_ranges": ["6-8"],
        "languages": ["da", "it", "en"],
        "countries_in_scope": ["DK", "IT"],
        "sdg_focus": [4],
        "start_date": "2024-09-01",
        "end_date": "2025-06-15",
        "status": "completed",
        "is_public": True,
        "created_at": "2024-08-01T10:00:00+00:00",
    },
]

PROGRAM_PARTNERS = [
    {"id": "pp-build-lego", "program_id": "program-build-the-change", "partner_id": "partner-lego-foundation",
     "role": "co_host", "status": "accepted", "invited_by": "puser-anna-bianchi",
     "permissions": {"can_edit_program": True, "can_invite_coordinators": True, "can_view_all_data": True,
                     "can_manage_projects": True, "can_remove_participants": False}},
    {"id": "pp-climate-unicef-dk", "program_id": "program-climate-voices", "partner_id": "partner-unicef-denmark",
     "role": "supporter", "status": "accepted", "invited_by": "puser-james-carter",
     "permissions": {"can_view_all_data": True}},
    {"id": "pp-rights-stc-it", "program_id": "program-rights-classroom", "partner_id": "partner-save-the-children-italy",
     "role": "advisor", "status": "invited"},
]


# ---------------------------------------------------------------------------
# Coordinators, institutions and teachers
# ---------------------------------------------------------------------------

COORDINATORS = [
    {"id": "coord-it-giulia", "program_id": "program-build-the-change", "country": "IT", "region": "Lazio",
     "email": "giulia.rossi@savethechildren.it", "first_name": "Giulia", "last_name": "Rossi", "status": "active"},
    {"id": "coord-mx-diego", "program_id": "program-build-the-change", "country": "MX", "region": "CDMX",
     "email": "diego.hernandez@savethechildren.mx", "first_name": "Diego", "last_name": "Hernandez", "status": "active"},
    {"id": "coord-gb-sarah", "program_id": "program-climate-voices", "country": "GB", "region": "North West",
     "email": "sarah.jones@unicef.org.uk", "first_name": "Sarah", "last_name": "Jones", "status": "active"},
    {"id": "coord-dk-mads", "program_id": "program-climate-voices", "country": "DK",
     "email": "mads.nielsen@unicef.dk", "first_name": "Mads", "last_name": "Nielsen", "status": "invited"},
    {"id": "coord-mx-diego-rights", "program_id": "program-rights-classroom", "country": "MX", "region": "Oaxaca",
     "email": "diego.hernandez@savethechildren.mx", "first_name": "Diego", "last_name": "Hernandez", "status": "active"},
]

INSTITUTIONS = [
    {"id": "inst-liceo-roma", "program_id": "program-build-the-change", "coordinator_id": "coord-it-giulia",
     "name": "Istituto Comprensivo Roma Centro", "type": "public_school", "country": "IT", "city": "Rome",
     "contact_email": "segreteria@icromacentro.it", "student_count": 420, "teacher_count": 38,
     "education_levels": ["primary", "secondary"], "languages": ["it"], "status": "active"},
    {"id": "inst-escuela-cdmx", "program_id": "program-build-the-change", "coordinator_id": "coord-mx-diego",
     "name": "Escuela Secundaria Benito Juarez", "type": "secondary_school", "country": "MX", "city": "Mexico City",
     "contact_email": "direccion@esbj.edu.mx", "student_count": 380, "teacher_count": 25,
     "education_levels": ["secondary"], "languages": ["es"], "status": "active"},
    {"id": "inst-manchester-academy", "program_id": "program-climate-voices", "coordinator_id": "coord-gb-sarah",
     "name": "Manchester Park Academy", "type": "public_school", "country": "GB", "city": "Manchester",
     "contact_email": "office@manchesterpark.sch.uk", "student_count": 650, "teacher_count": 52,
     "education_levels": ["secondary"], "languages": ["en"], "status": "active"},
    {"id": "inst-aarhus-skole", "program_id": "program-climate-voices", "coordinator_id": "coord-dk-mads",
     "name": "Aarhus Friskole", "type": "private_school", "country": "DK", "city": "Aarhus",
     "contact_email": "kontor@aarhusfriskole.dk", "student_count": 300, "teacher_count": 21,
     "education_levels": ["primary", "secondary"], "languages": ["da", "en"], "status": "invited"},
    {"id": "inst-oaxaca-rural", "program_id": "program-rights-classroom", "coordinator_id": "coord-mx-diego-rights",
     "name": "Escuela Primaria Rural Guelatao", "type": "primary_school", "country": "MX", "city": "Guelatao",
     "contact_email": "direccion@eprguelatao.edu.mx", "student_count": 210, "teacher_count": 9,
     "education_levels": ["primary"], "languages": ["es"], "status": "active"},
]

INSTITUTION_TEACHERS = [
    {"id": "teacher-marco-liceo", "institution_id": "inst-liceo-roma", "program_id": "program-build-the-change",
     "email": "marco.verdi@icromacentro.it", "first_name": "Marco", "last_name": "Verdi",
     "subject": "Technology", "status": "active"},
    {"id": "teacher-maria-cdmx", "institution_id": "inst-escuela-cdmx", "program_id": "program-build-the-change",
     "email": "maria.lopez@esbj.edu.mx", "first_name": "Maria", "last_name": "Lopez",
     "subject": "Civics", "status": "active"},
    {"id": "teacher-maria-oaxaca", "institution_id": "inst-oaxaca-rural", "program_id": "program-rights-classroom",
     "email": "maria.lopez@esbj.edu.mx", "first_name": "Maria", "last_name": "Lopez",
     "subject": "Civics", "status": "invited"},
    {"id": "teacher-emily-manchester", "institution_id": "inst-manchester-academy", "program_id": "program-climate-voices",
     "email": "emily.clarke@manchesterpark.sch.uk", "first_name": "Emily", "last_name": "Clarke",
     "subject": "Geography", "status": "active"},
    {"id": "teacher-freja-aarhus", "institution_id": "inst-aarhus-skole", "program_id": "program-climate-voices",
     "email": "freja.madsen@aarhusfriskole.dk", "first_name": "Freja", "last_name": "Madsen",
     "subject": "Science", "status": "invited"},
]


# ---------------------------------------------------------------------------
# Projects, templates, invitations, activities
# ---------------------------------------------------------------------------

PROGRAM_TEMPLATES = [
    {"id": "template-community-makers", "program_id": "program-build-the-change", "title": "Community Makers",
     "summary": "Map a problem in your neighbourhood and build a model of the fix.",
     "estimated_duration_weeks": 6, "recommended_start_month": "October",
     "subject_focus": ["technology", "civics"], "sdg_alignment": [11], "language_support": ["it", "es", "en"],
     "project_type": "create_solutions"},
    {"id": "template-climate-report", "program_id": "program-climate-voices", "title": "Local Climate Report",
     "summary": "Measure, interview and publish a joint climate report with a partner class.",
     "estimated_duration_weeks": 8, "recommended_start_month": "November",
     "subject_focus": ["geography", "science"], "sdg_alignment": [13], "language_support": ["en", "da"],
     "project_type": "environmental_action"},
    {"id": "template-playful-maths", "program_id": "program-play-to-learn", "title": "Playful Maths Swap",
     "summary": "Swap brick-based maths challenges with a partner class.",
     "estimated_duration_weeks": 4, "subject_focus": ["mathematics"], "sdg_alignment": [4],
     "language_support": ["da", "it"], "is_active": False},
]

PROGRAM_PROJECTS = [
    {"id": "project-rome-playgrounds", "program_id": "program-build-the-change", "title": "Safer Playgrounds Rome",
     "created_by_type": "teacher", "created_by_id": "teacher-marco-liceo",
     "participant_ids": ["teacher-maria-cdmx"], "status": "active", "template_id": "template-community-makers"},
    {"id": "project-cdmx-water", "program_id": "program-build-the-change", "title": "Clean Water Stations",
     "created_by_type": "teacher", "created_by_id": "teacher-maria-cdmx", "status": "completed",
     "template_id": "template-community-makers"},
    {"id": "project-manchester-air", "program_id": "program-climate-voices", "title": "Air Quality Diaries",
     "created_by_type": "teacher", "created_by_id": "teacher-emily-manchester",
     "participant_ids": ["teacher-freja-aarhus"], "status": "active", "template_id": "template-climate-report"},
    {"id": "project-play-maths", "program_id": "program-play-to-learn", "title": "Brick Fractions",
     "created_by_type": "partner", "created_by_id": "puser-lea-hansen", "status": "completed",
     "template_id": "template-playful-maths"},
]

INVITATIONS = [
    {"id": "invite-coord-dk", "program_id": "program-climate-voices", "invitation_type": "coordinator",
     "recipient_email": "mads.nielsen@unicef.dk", "recipient_name": "Mads Nielsen",
     "sent_by": "puser-james-carter", "sent_by_type": "partner", "token": "tok-coord-dk-7f3a",
     "status": "pending", "sent_at": "2025-05-02T08:30:00+00:00", "expires_at": "2025-06-02T08:30:00+00:00",
     "assigned_country": "DK"},
    {"id": "invite-inst-aarhus", "program_id": "program-climate-voices", "invitation_type": "institution",
     "recipient_email": "kontor@aarhusfriskole.dk", "sent_by": "coord-dk-mads", "sent_by_type": "coordinator",
     "token": "tok-inst-aarhus-91bc", "status": "pending", "sent_at": "2025-05-10T08:30:00+00:00"},
    {"id": "invite-teacher-maria", "program_id": "program-build-the-change", "invitation_type": "teacher",
     "recipient_email": "maria.lopez@esbj.edu.mx", "sent_by": "coord-mx-diego", "sent_by_type": "coordinator",
     "token": "tok-teacher-maria-22de", "status": "accepted", "sent_at": "2025-03-01T08:30:00+00:00",
     "responded_at": "2025-03-03T14:00:00+00:00"},
    {"id": "invite-copartner-stc-it", "program_id": "program-rights-classroom", "invitation_type": "co_partner",
     "recipient_email": "scuole@savethechildren.it", "sent_by": "partner-save-the-children-mexico",
     "sent_by_type": "partner", "token": "tok-copartner-5e10", "status": "pending",
     "sent_at": "2025-04-22T08:30:00+00:00"},
]

ACTIVITIES = [
    {"id": "activity-lego-joined", "program_id": "program-build-the-change", "type": "co_partner_joined",
     "actor_name": "LEGO Foundation", "actor_type": "partner",
     "description": "LEGO Foundation joined as co-host.", "timestamp": "2025-02-05T10:00:00+00:00"},
    {"id": "activity-roma-joined", "program_id": "program-build-the-change", "type": "institution_joined",
     "actor_name": "Giulia Rossi", "actor_type": "coordinator",
     "description": "Istituto Comprensivo Roma Centro joined the program.", "timestamp": "2025-03-12T10:00:00+00:00"},
    {"id": "activity-air-created", "program_id": "program-climate-voices", "type": "project_created",
     "actor_name": "Emily Clarke", "actor_type": "teacher",
     "description": "Air Quality Diaries project created.", "timestamp": "2025-05-20T10:00:00+00:00"},
]


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

RESOURCES = [
    {"id": "resource-stc-it-toolkit", "title": "Child Participation Toolkit (IT)", "type": "document",
     "language": "it", "target_audience": ["teachers"], "sdg_alignment": [4, 16], "tags": ["participation"],
     "owner_role": "partner", "owner_organization": "Save the Children Italy",
     "owner_partner_id": "partner-save-the-children-italy", "availability_scope": "organization",
     "source_url": "https://resources.example.org/stc-it/toolkit.pdf", "source_type": "file",
     "updated_at": "2025-05-10T09:00:00+00:00"},
    {"id": "resource-unicef-gb-climate", "title": "Climate Rights Lesson Pack", "type": "presentation",
     "language": "en", "target_audience": ["teachers", "students"], "sdg_alignment": [13],
     "owner_role": "partner", "owner_organization": "UNICEF England",
     "owner_partner_id": "partner-unicef-england", "availability_scope": "organization",
     "source_url": "https://resources.example.org/unicef-uk/climate-pack",
     "updated_at": "2025-05-28T09:00:00+00:00"},
    {"id": "resource-stc-safeguarding", "title": "Safeguarding Essentials", "type": "video",
     "language": "en", "target_audience": ["coordinators", "teachers"], "sdg_alignment": [16],
     "owner_role": "parent", "owner_organization": "Save the Children World",
     "availability_scope": "all_partners", "source_url": "https://resources.example.org/stc/safeguarding",
     "is_public": True, "updated_at": "2025-04-01T09:00:00+00:00"},
    {"id": "resource-stc-italy-briefing", "title": "Country Office Briefing: Italy", "type": "document",
     "language": "it", "target_audience": ["coordinators"],
     "owner_role": "parent", "owner_organization": "Save the Children World",
     "availability_scope": "specific_partners", "target_partner_ids": ["partner-save-the-children-italy"],
     "source_url": "https://resources.example.org/stc/briefing-it", "updated_at": "2025-05-20T09:00:00+00:00"},
    {"id": "resource-unicef-network-guide", "title": "National Committee Engagement Guide", "type": "website",
     "language": "en", "target_audience": ["coordinators"], "sdg_alignment": [17],
     "owner_role": "parent", "owner_organization": "UNICEF World Organization",
     "availability_scope": "specific_partners",
     "target_partner_ids": ["partner-unicef-england", "partner-unicef-denmark"],
     "source_url": "https://resources.example.org/unicef/engagement", "updated_at": "2025-03-15T09:00:00+00:00"},
    {"id": "resource-unicef-internal-plan", "title": "Network Strategy Draft", "type": "document",
     "language": "en", "owner_role": "parent", "owner_organization": "UNICEF World Organization",
     "availability_scope": "organization", "source_type": "file", "updated_at": "2025-02-01T09:00:00+00:00"},
]


def build_seed_database(seeded_at: str) -> PrototypeDatabase:
    """Return a fresh copy of the sample dataset, stamped with seeded_at."""
    # Rebuild the dicts on every call; _stamp mutates them.
    def rows(source: list[dict]) -> list[dict]:
        return _stamp([dict(row) for row in source])

    return PrototypeDatabase.model_validate({
        "partners": rows(PARTNERS),
        "partner_users": rows(PARTNER_USERS),
        "programs": rows(PROGRAMS),
        "program_partners": rows(PROGRAM_PARTNERS),
        "coordinators": rows(COORDINATORS),
        "institutions": rows(INSTITUTIONS),
        "institution_teachers": rows(INSTITUTION_TEACHERS),
        "program_projects": rows(PROGRAM_PROJECTS),
        "program_templates": rows(PROGRAM_TEMPLATES),
        "resources": rows(RESOURCES),
        "invitations": rows(INVITATIONS),
        "activities": rows(ACTIVITIES),
        "metadata": DatabaseMetadata(seeded_at=seeded_at).model_dump(),
    })
