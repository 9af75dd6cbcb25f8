"""
Request dependencies shared by the routers.
"""
from fastapi import Request

from superheroes.catalog import HeroCatalog


def get_catalog(request: Request) -> HeroCatalog:
    """The catalog attached to the running app by create_app()."""
    return request.app.state.catalog
