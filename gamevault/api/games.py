# gamevault/api/games.py

from fastapi import APIRouter, Depends, Request
from gamevault.api.auth import get_current_user
from gamevault.core.catalog import CatalogClient
from gamevault.errors import ValidationError


router = APIRouter(dependencies=[Depends(get_current_user)])


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


@router.get("/games")
def search_games(search: str | None = None, catalog: CatalogClient = Depends(get_catalog)):
    """
    Searches the catalog by name and relays the upstream `results` array.
    """
    if not search:
        raise ValidationError('Query parameter "search" is required')
    return catalog.search_games(search)


# `path` lets an empty id reach the handler instead of falling through to a 404
@router.get("/game/{game_id:path}")
def get_game(game_id: str, catalog: CatalogClient = Depends(get_catalog)):
    if not game_id.strip():
        raise ValidationError('Path parameter "id" is required')
    return catalog.get_game(game_id)
