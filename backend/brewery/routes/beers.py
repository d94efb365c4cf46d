"""
Brewery Backend — Beer Route Handlers
=======================================

What:  HTTP boundary for /api/v2/beer.
How:   Binds verbs and paths to BeerService calls and translates results to
       status codes and headers. Not-found and validation failures are raised
       as exceptions and rendered by the global handlers in main.py.

Endpoints:
    GET    /api/v2/beer            200 + streamed JSON array, X-Total-Count
    GET    /api/v2/beer/{beer_id}  200 | 404
    POST   /api/v2/beer            201 + Location | 400
    PUT    /api/v2/beer/{beer_id}  204 | 400 | 404
    PATCH  /api/v2/beer/{beer_id}  204 | 400 | 404
    DELETE /api/v2/beer/{beer_id}  204 | 404
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from brewery.dependencies import get_beer_service
from brewery.routes.streaming import json_array_response
from brewery.schemas.beer import BeerDTO, BeerPatch, BeerRequest
from brewery.schemas.common import ErrorResponse
from brewery.services.beer_service import BeerService

BEER_PATH = "/api/v2/beer"

router = APIRouter(prefix=BEER_PATH, tags=["Beer"])

NOT_FOUND = {404: {"description": "Beer not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid payload", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[BeerDTO],
    summary="List all beers",
    description="Streams every beer in store order. `X-Total-Count` carries the row count.",
)
async def list_beers(service: BeerService = Depends(get_beer_service)):
    total = await service.count_beers()
    return await json_array_response(
        service.list_beers(),
        headers={"X-Total-Count": str(total)},
    )


@router.get(
    "/{beer_id}",
    response_model=BeerDTO,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Get a beer by ID",
)
async def get_beer_by_id(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
) -> BeerDTO:
    return await service.get_beer_by_id(beer_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Create a beer",
    description="Returns 201 with a `Location` header pointing at the new beer.",
)
async def save_beer(
    beer: BeerRequest,
    request: Request,
    service: BeerService = Depends(get_beer_service),
) -> Response:
    saved = await service.save_beer(beer)
    # Origin comes from the inbound request, so proxies and test hosts resolve correctly
    location = request.url_for("get_beer_by_id", beer_id=saved.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Replace a beer",
)
async def update_beer(
    beer_id: int,
    beer: BeerRequest,
    service: BeerService = Depends(get_beer_service),
) -> Response:
    await service.update_beer(beer_id, beer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Partially update a beer",
    description="Only non-blank strings and non-null numbers in the body are applied.",
)
async def patch_beer(
    beer_id: int,
    beer: BeerPatch,
    service: BeerService = Depends(get_beer_service),
) -> Response:
    await service.patch_beer(beer_id, beer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a beer",
)
async def delete_beer(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
) -> Response:
    await service.delete_beer(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
