"""
Role dashboards: parent organizations, teachers, coordinators and schools.

Each endpoint identifies the caller by e-mail (or organization name for
parent organizations) and returns the denormalized context its dashboard
renders. Unknown callers get empty contexts, not 404s.
"""

from fastapi import APIRouter, Depends, Query

from partnerhub.dependencies import get_database
from partnerhub.models.records import ProgramResource, PrototypeDatabase
from partnerhub.models.views import CoordinatorContext, ParentContext, SchoolContext, TeacherContext
from partnerhub.selectors.contexts import (
    build_coordinator_context,
    build_parent_context,
    build_school_context,
    build_teacher_context,
)
from partnerhub.selectors.resources import get_resources_for_parent

router = APIRouter()


@router.get(
    "/v1/parents/context",
    response_model=ParentContext,
    summary="Parent organization dashboard",
    description="Network, profile preset, country partners, their public programs, and all resources.",
    tags=["Parents"],
)
async def parent_context(
    organization: str | None = Query(default=None, examples=["Save the Children World"]),
    db: PrototypeDatabase = Depends(get_database),
) -> ParentContext:
    return build_parent_context(db, organization)


@router.get(
    "/v1/parents/resources",
    response_model=list[ProgramResource],
    summary="Resources for a parent organization",
    tags=["Parents"],
)
async def parent_resources(db: PrototypeDatabase = Depends(get_database)) -> list[ProgramResource]:
    return get_resources_for_parent(db.resources)


@router.get(
    "/v1/teachers/context",
    response_model=TeacherContext,
    summary="Teacher dashboard",
    tags=["Teachers"],
)
async def teacher_context(
    email: str = Query(default="", examples=["maria.lopez@esbj.edu.mx"]),
    db: PrototypeDatabase = Depends(get_database),
) -> TeacherContext:
    return build_teacher_context(db, email)


@router.get(
    "/v1/coordinators/context",
    response_model=CoordinatorContext,
    summary="Coordinator dashboard",
    tags=["Coordinators"],
)
async def coordinator_context(
    email: str = Query(default=""),
    db: PrototypeDatabase = Depends(get_database),
) -> CoordinatorContext:
    return build_coordinator_context(db, email)


@router.get(
    "/v1/schools/context",
    response_model=SchoolContext,
    summary="School dashboard",
    tags=["Schools"],
)
async def school_context(
    email: str = Query(default=""),
    db: PrototypeDatabase = Depends(get_database),
) -> SchoolContext:
    return build_school_context(db, email)
