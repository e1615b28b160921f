"""
Resource visibility for partner and parent-organization views.

A partner sees a resource when:
  - it owns it (owner_role "partner" and owner_partner_id matches), or
  - the parent organization shared it with every partner ("all_partners"), or
  - the parent organization shared it with a list that includes the partner
    ("specific_partners").

Parent-owned resources scoped to "organization" stay with the parent.
Newest first, by updated_at, falling back to created_at.
"""

from partnerhub.models.records import AvailabilityScope, OwnerRole, ProgramResource
from partnerhub.selectors.utils import parse_timestamp


def _newest_first(resources: list[ProgramResource]) -> list[ProgramResource]:
    return sorted(
        resources,
        key=lambda r: parse_timestamp(r.updated_at or r.created_at),
        reverse=True,
    )


def is_visible_to_partner(resource: ProgramResource, partner_id: str) -> bool:
    if resource.owner_role == OwnerRole.partner:
        return resource.owner_partner_id == partner_id
    if resource.availability_scope == AvailabilityScope.all_partners:
        return True
    if resource.availability_scope == AvailabilityScope.specific_partners:
        return partner_id in (resource.target_partner_ids or [])
    return False


def get_resources_for_partner(
    resources: list[ProgramResource] | None,
    partner_id: str | None,
) -> list[ProgramResource]:
    if not partner_id or not resources:
        return []
    return _newest_first([r for r in resources if is_visible_to_partner(r, partner_id)])


def get_resources_for_parent(resources: list[ProgramResource] | None) -> list[ProgramResource]:
    return _newest_first(list(resources or []))
