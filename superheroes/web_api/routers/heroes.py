"""
Heroes Router
=============
Dataset access, fuzzy search and battle comparison endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from superheroes.catalog import HeroCatalog
from superheroes.models import CompareRequest, Hero
from superheroes.web_api.dependencies import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Superhero not found"
INVALID_COMPARE = "Invalid request: both hero1 and hero2 with name and powerstats are required"


def _require_hero(catalog: HeroCatalog, hero_id: str) -> Hero:
    hero = catalog.get_hero_by_id(hero_id)
    if hero is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return hero


@router.get("")
def list_superheroes(catalog: HeroCatalog = Depends(get_catalog)):
    """
    List every superhero, in dataset order.
    """
    return [hero.to_dict() for hero in catalog.get_all_heroes()]


@router.get("/search")
def search_superheroes(q: str = "", catalog: HeroCatalog = Depends(get_catalog)):
    """
    Fuzzy search superheroes by name.

    - **q**: Search text. Blank returns every hero in dataset order.
    """
    return [hero.to_dict() for hero in catalog.search(q)]


@router.post("/compare")
async def compare_superheroes(request: Request, catalog: HeroCatalog = Depends(get_catalog)):
    """
    Compare two superheroes and generate a battle story.

    Body: {"hero1": {name, powerstats}, "hero2": {name, powerstats}}
    """
    try:
        body = await request.json()
        compare = CompareRequest.model_validate(body)
    except (ValueError, ValidationError) as e:
        logger.info(f"Rejected compare request: {e}")
        return PlainTextResponse(INVALID_COMPARE, status_code=400)

    story = catalog.battle(compare.hero1, compare.hero2)
    head_to_head = catalog.head_to_head(compare.hero1, compare.hero2)
    return {"story": story, "head_to_head": head_to_head.model_dump(mode="json")}


@router.get("/{hero_id}")
def get_superhero(hero_id: str, catalog: HeroCatalog = Depends(get_catalog)):
    """
    Get a single superhero by id.
    """
    return _require_hero(catalog, hero_id).to_dict()


@router.get("/{hero_id}/powerstats")
def get_powerstats(hero_id: str, catalog: HeroCatalog = Depends(get_catalog)):
    """
    Get the powerstats of a superhero by id.
    """
    return _require_hero(catalog, hero_id).powerstats.as_dict()
