"""
Parent networks: which country partners a parent organization oversees.

A parent organization (e.g. "Save the Children World") is mapped to a
network through an explicit lookup table keyed by its normalized name.
Partners declare membership themselves via Partner.network_id, and only
country-level members are returned. Organizations not in the table get the
generic network, which sees every partner.
"""

import re
from enum import Enum

from partnerhub.models.records import Partner, PrototypeDatabase
from partnerhub.models.views import ParentContact, ParentOrganizationPreset


class ParentNetwork(str, Enum):
    stc = "stc"
    unicef = "unicef"
    generic = "generic"


# Normalized organization name -> network.
PARENT_ORGANIZATIONS: dict[str, ParentNetwork] = {
    "save the children": ParentNetwork.stc,
    "save the children world": ParentNetwork.stc,
    "save the children international": ParentNetwork.stc,
    "stc": ParentNetwork.stc,
    "unicef": ParentNetwork.unicef,
    "unicef world": ParentNetwork.unicef,
    "unicef world organization": ParentNetwork.unicef,
}


def normalize_organization(value: str | None) -> str:
    """Trim, lower-case and collapse whitespace."""
    return re.sub(r"\s+", " ", (value or "").strip().lower())


def resolve_parent_network(organization: str | None) -> ParentNetwork:
    return PARENT_ORGANIZATIONS.get(normalize_organization(organization), ParentNetwork.generic)


def get_scoped_parent_partners(db: PrototypeDatabase | None, organization: str | None) -> list[Partner]:
    if db is None:
        return []
    network = resolve_parent_network(organization)
    if network is ParentNetwork.generic:
        return list(db.partners)
    return [
        partner for partner in db.partners
        if partner.network_id == network.value and partner.organization_level == "country"
    ]


def get_scoped_parent_partner_ids(db: PrototypeDatabase | None, organization: str | None) -> list[str]:
    return [partner.id for partner in get_scoped_parent_partners(db, organization)]


# ---------------------------------------------------------------------------
# Profile presets shown on the parent organization dashboard
# ---------------------------------------------------------------------------

PARENT_PRESETS: dict[ParentNetwork, ParentOrganizationPreset] = {
    ParentNetwork.stc: ParentOrganizationPreset(
        name="Save the Children World",
        website="https://www.savethechildren.net",
        short_description=(
            "Coordinating Save the Children country teams to scale child-centered "
            "education and rights programs."
        ),
        contacts=[
            ParentContact(name="Global Partnerships", email="partnerships@savethechildren.org",
                          role="Global Partnerships Lead", is_primary=True),
            ParentContact(name="Country Operations", email="country-operations@savethechildren.org",
                          role="Country Operations Lead"),
        ],
        countries=["Italy", "Mexico"],
        languages=["English", "Italian", "Spanish"],
        sdg_tags=["4", "10", "16", "17"],
        thematic_tags=["Children's Rights", "Global Citizenship", "Community-Based Learning",
                       "Human Rights Education"],
        mission=(
            "Save the Children works to protect every child's rights through country "
            "partnerships, teacher support, and collaborative learning programs."
        ),
    ),
    ParentNetwork.unicef: ParentOrganizationPreset(
        name="UNICEF World Organization",
        website="https://www.unicef.org",
        short_description="Connecting UNICEF country teams and partners to scale impact for children worldwide.",
        contacts=[
            ParentContact(name="Global Partnerships", email="partners@unicef.org",
                          role="Global Partnerships Lead", is_primary=True),
            ParentContact(name="Regional Coordination", email="operations@unicef.org",
                          role="Regional Operations"),
        ],
        countries=["Denmark", "England"],
        languages=["English", "French", "Spanish"],
        sdg_tags=["4", "5", "10", "13", "16", "17"],
        thematic_tags=["Children's Rights", "Global Citizenship", "Cultural Exchange",
                       "Human Rights Education", "Healthy Communities"],
        mission=(
            "UNICEF works to secure every child's rights through global coordination, "
            "fundraising, education, and advocacy."
        ),
    ),
}


def get_parent_organization_preset(organization: str | None) -> ParentOrganizationPreset:
    network = resolve_parent_network(organization)
    if network in PARENT_PRESETS:
        return PARENT_PRESETS[network].model_copy(deep=True)

    return ParentOrganizationPreset(
        name=(organization or "").strip() or "Parent Organization",
        website="https://partnerhub.example.org",
        short_description="Coordinating country partners to scale impact across programs and resources.",
        contacts=[
            ParentContact(name="Global Partnerships", email="partnerships@partnerhub.example.org",
                          role="Partnerships Lead", is_primary=True),
        ],
        languages=["English"],
        sdg_tags=["4", "16", "17"],
        thematic_tags=["Children's Rights", "Global Citizenship"],
        mission="Coordinate country teams, share resources, and ensure program quality across the network.",
    )
