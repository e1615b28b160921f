"""
/v1/store -- The whole prototype database.

Read the full snapshot, seed the sample dataset, or wipe everything.
Seeding is a no-op on a store that already has records unless force=true.
"""

from fastapi import APIRouter, Depends, Query

from partnerhub.dependencies import get_database, get_view
from partnerhub.models.records import PrototypeDatabase
from partnerhub.models.views import StoreStatus
from partnerhub.storage.view import DatabaseView

router = APIRouter()


@router.get(
    "/v1/store",
    response_model=PrototypeDatabase,
    summary="Full snapshot",
    description="Every table plus metadata, exactly as persisted.",
    tags=["Store"],
)
async def get_snapshot(db: PrototypeDatabase = Depends(get_database)) -> PrototypeDatabase:
    return db


@router.post(
    "/v1/store/seed",
    response_model=StoreStatus,
    summary="Seed the sample dataset",
    description=(
        "Writes the sample dataset if the store is empty. "
        "With force=true the current snapshot is replaced even if it has data."
    ),
    tags=["Store"],
)
async def seed(
    force: bool = Query(default=False, description="Replace a non-empty snapshot."),
    view: DatabaseView = Depends(get_view),
) -> StoreStatus:
    result = view.store.seed(force=force)
    return StoreStatus(
        seeded=result.seeded,
        seeded_at=result.database.metadata.seeded_at,
        counts=result.database.counts(),
    )


@router.post(
    "/v1/store/reset",
    response_model=StoreStatus,
    summary="Reset the store",
    description="Clears every table. By default the sample dataset is written again straight after.",
    tags=["Store"],
)
async def reset(
    reseed: bool = Query(default=True, description="Write the sample dataset after clearing."),
    view: DatabaseView = Depends(get_view),
) -> StoreStatus:
    if reseed:
        view.reset()
    else:
        view.store.reset()

    db = view.database
    return StoreStatus(seeded=reseed, seeded_at=db.metadata.seeded_at, counts=db.counts())
