"""
FastAPI dependencies.

The store and its view are built once in the application lifespan and kept
on app.state. Handlers ask for them here instead of importing a global, so
tests can hand the app a store on any backend.
"""

from fastapi import Depends, Request

from partnerhub.models.records import PrototypeDatabase
from partnerhub.storage.view import DatabaseView


def get_view(request: Request) -> DatabaseView:
    view: DatabaseView = request.app.state.view
    # Another process may have rewritten the document since the last request.
    view.sync()
    return view


def get_database(view: DatabaseView = Depends(get_view)) -> PrototypeDatabase:
    return view.database if view.database is not None else PrototypeDatabase()
