"""
/v1/partners -- Partner dashboards: which partner a session acts for, its
programs, its roll-up metrics and the resources it may see.
"""

from fastapi import APIRouter, Depends, Query

from partnerhub.dependencies import get_database
from partnerhub.models.records import ProgramResource, PrototypeDatabase
from partnerhub.models.views import PartnerContext, PartnerProgramMetrics, ProgramSummary, UserSession
from partnerhub.selectors.contexts import resolve_partner_context
from partnerhub.selectors.programs import aggregate_program_metrics, build_program_summaries_for_partner
from partnerhub.selectors.resources import get_resources_for_partner

router = APIRouter()


@router.get(
    "/v1/partners/resolve",
    response_model=PartnerContext,
    summary="Resolve a session to a partner",
    description="Matches the organization name first, then the e-mail domain; falls back to the first partner.",
    tags=["Partners"],
)
async def resolve(
    email: str = Query(default=""),
    organization: str | None = Query(default=None),
    db: PrototypeDatabase = Depends(get_database),
) -> PartnerContext:
    return resolve_partner_context(db, UserSession(email=email, organization=organization))


@router.get(
    "/v1/partners/{partner_id}/programs",
    response_model=list[ProgramSummary],
    summary="Programs of a partner",
    tags=["Partners"],
)
async def partner_programs(
    partner_id: str,
    include_related: bool = Query(default=False, description="Also include co-partnered programs."),
    db: PrototypeDatabase = Depends(get_database),
) -> list[ProgramSummary]:
    return build_program_summaries_for_partner(db, partner_id, include_related)


@router.get(
    "/v1/partners/{partner_id}/metrics",
    response_model=PartnerProgramMetrics,
    summary="Roll-up metrics for a partner",
    tags=["Partners"],
)
async def partner_metrics(
    partner_id: str,
    include_related: bool = Query(default=False),
    db: PrototypeDatabase = Depends(get_database),
) -> PartnerProgramMetrics:
    return aggregate_program_metrics(build_program_summaries_for_partner(db, partner_id, include_related))


@router.get(
    "/v1/partners/{partner_id}/resources",
    response_model=list[ProgramResource],
    summary="Resources visible to a partner",
    tags=["Partners"],
)
async def partner_resources(partner_id: str, db: PrototypeDatabase = Depends(get_database)) -> list[ProgramResource]:
    return get_resources_for_partner(db.resources, partner_id)
