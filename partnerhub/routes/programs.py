"""
/v1/programs -- Program catalog, summaries and cascade delete.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query

from partnerhub.dependencies import get_database, get_view
from partnerhub.models.records import ProgramInvitation, PrototypeDatabase
from partnerhub.models.views import ProgramCatalogItem, ProgramSummary
from partnerhub.selectors.programs import (
    build_program_catalog,
    cascade_delete_program,
    find_program_summary_by_id,
)
from partnerhub.storage.view import DatabaseView

router = APIRouter()


@router.get(
    "/v1/programs/catalog",
    response_model=list[ProgramCatalogItem],
    summary="Program catalog",
    description=(
        "One card per program with host/supporting partner and participation metrics. "
        "Private programs are included only with include_private=true."
    ),
    tags=["Programs"],
)
async def catalog(
    include_private: bool = Query(default=False),
    db: PrototypeDatabase = Depends(get_database),
) -> list[ProgramCatalogItem]:
    return build_program_catalog(db, include_private=include_private)


@router.get(
    "/v1/programs/{program_id}",
    response_model=ProgramSummary,
    summary="Program summary",
    tags=["Programs"],
)
async def program_summary(program_id: str, db: PrototypeDatabase = Depends(get_database)) -> ProgramSummary:
    summary = find_program_summary_by_id(db, program_id)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"Program '{program_id}' not found.")
    return summary


@router.get(
    "/v1/programs/{program_id}/invitations",
    response_model=list[ProgramInvitation],
    summary="Invitations for a program",
    tags=["Programs"],
)
async def program_invitations(
    program_id: str,
    invitation_type: Literal["co_partner", "coordinator", "institution", "teacher"] | None = Query(default=None),
    view: DatabaseView = Depends(get_view),
) -> list[ProgramInvitation]:
    return view.invitations_for_program(program_id, invitation_type)


@router.delete(
    "/v1/programs/{program_id}",
    summary="Delete a program and everything attached to it",
    description="Removes co-partner links, coordinators, institutions, teachers, projects, "
                "templates, invitations and activities of the program, then the program.",
    tags=["Programs"],
)
async def delete_program(program_id: str, view: DatabaseView = Depends(get_view)) -> dict:
    db = view.database
    if db is None or not any(p.id == program_id for p in db.programs):
        raise HTTPException(status_code=404, detail=f"Program '{program_id}' not found.")

    removed = cascade_delete_program(db, program_id, view.delete_record)
    return {"program_id": program_id, "records_removed": removed}
