"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter, Depends

from superheroes import __version__
from superheroes.catalog import HeroCatalog
from superheroes.web_api.dependencies import get_catalog

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
def readiness_check(catalog: HeroCatalog = Depends(get_catalog)):
    """
    Readiness check endpoint.
    Returns OK once the hero dataset has loaded.
    """
    return {"status": "ready", **catalog.initialize()}
