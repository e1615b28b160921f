"""
/v1/tables/{table} -- Generic record CRUD.

Thin HTTP wrapper around PrototypeStore.create/update/delete. The table name
is checked against the schema by FastAPI (unknown names get a 422). Record
bodies are validated against the table's model; ids are generated unless the
body supplies an unused one.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response
from pydantic import ValidationError

from partnerhub.dependencies import get_database, get_view
from partnerhub.models.records import PrototypeDatabase, TableName
from partnerhub.storage.store import DuplicateRecordError, StoreError
from partnerhub.storage.view import DatabaseView

router = APIRouter()


def _not_found(table: TableName, record_id: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=f"No record '{record_id}' in table '{table.value}'.",
    )


def _unavailable(exc: StoreError) -> HTTPException:
    return HTTPException(status_code=503, detail=f"Storage unavailable: {exc}")


@router.get(
    "/v1/tables/{table}",
    summary="List a table",
    tags=["Records"],
)
async def list_records(table: TableName, db: PrototypeDatabase = Depends(get_database)) -> list[dict[str, Any]]:
    return [row.model_dump() for row in db.table(table)]


@router.get(
    "/v1/tables/{table}/{record_id}",
    summary="Get one record",
    tags=["Records"],
)
async def get_record(
    table: TableName,
    record_id: str,
    db: PrototypeDatabase = Depends(get_database),
) -> dict[str, Any]:
    for row in db.table(table):
        if row.id == record_id:
            return row.model_dump()
    raise _not_found(table, record_id)


@router.post(
    "/v1/tables/{table}",
    status_code=201,
    summary="Create a record",
    description="Appends a record. 409 if the body supplies an id that already exists.",
    tags=["Records"],
)
async def create_record(
    table: TableName,
    data: dict[str, Any] = Body(...),
    view: DatabaseView = Depends(get_view),
) -> dict[str, Any]:
    try:
        record = view.create_record(table, data)
    except DuplicateRecordError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc
    except StoreError as exc:
        raise _unavailable(exc) from exc
    return record.model_dump()


@router.patch(
    "/v1/tables/{table}/{record_id}",
    summary="Update a record",
    description="Merges the body into the record. id and created_at cannot be changed.",
    tags=["Records"],
)
async def update_record(
    table: TableName,
    record_id: str,
    fields: dict[str, Any] = Body(...),
    view: DatabaseView = Depends(get_view),
) -> dict[str, Any]:
    try:
        record = view.update_record(table, record_id, fields)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc
    except StoreError as exc:
        raise _unavailable(exc) from exc
    if record is None:
        raise _not_found(table, record_id)
    return record.model_dump()


@router.delete(
    "/v1/tables/{table}/{record_id}",
    status_code=204,
    summary="Delete a record",
    tags=["Records"],
)
async def delete_record(
    table: TableName,
    record_id: str,
    view: DatabaseView = Depends(get_view),
) -> Response:
    try:
        removed = view.delete_record(table, record_id)
    except StoreError as exc:
        raise _unavailable(exc) from exc
    if not removed:
        raise _not_found(table, record_id)
    return Response(status_code=204)
