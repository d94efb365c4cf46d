"""
Brewery Backend — Beer Service
================================

What:  Business rules for the beer resource.
How:   Composes BeerRepository (persistence) and BeerMapper (entity ↔ DTO).
Who:   Called by the beer route handlers; constructed once in create_app().

Operation Flow:
    Route → BeerService → BeerRepository → (back) BeerMapper → Route

Update semantics:
    update_beer (PUT)   → every mutable field is overwritten, including
                          empty strings and nulls
    patch_beer  (PATCH) → only fields carrying a value are applied:
                          strings when they contain a non-whitespace char,
                          numbers whenever they are not null (0 and
                          negative values included)

Every operation that targets an id raises NotFoundError (→ 404) when the
row does not exist; nothing is created implicitly by PUT or PATCH.
"""

import logging
from typing import AsyncIterator

from brewery.exceptions import NotFoundError
from brewery.mappers.beer_mapper import BeerMapper
from brewery.models.beer import Beer
from brewery.repositories.beer_repository import BeerRepository
from brewery.schemas.beer import BeerDTO, BeerPatch, BeerRequest
from brewery.services.merge import has_text

logger = logging.getLogger(__name__)


class BeerService:
    """
    Responsibilities:
        - list_beers() / count_beers(): catalogue listing
        - get_beer_by_id(): single lookup with not-found handling
        - save_beer(): create
        - update_beer() / patch_beer(): full replace and partial merge
        - delete_beer(): removal with not-found handling
    """

    def __init__(self, repository: BeerRepository, mapper: BeerMapper):
        self.repository = repository
        self.mapper = mapper

    async def list_beers(self) -> AsyncIterator[BeerDTO]:
        """Yield every beer as a DTO, in store order, as rows arrive."""
        async for beer in self.repository.find_all():
            yield self.mapper.to_dto(beer)

    async def count_beers(self) -> int:
        return await self.repository.count()

    async def get_beer_by_id(self, beer_id: int) -> BeerDTO:
        beer = await self._find_or_raise(beer_id)
        return self.mapper.to_dto(beer)

    async def save_beer(self, request: BeerRequest) -> BeerDTO:
        saved = await self.repository.save(self.mapper.to_entity(request))
        logger.info("Beer %s created: %s", saved.id, saved.beer_name)
        return self.mapper.to_dto(saved)

    async def update_beer(self, beer_id: int, request: BeerRequest) -> BeerDTO:
        """
        Replace every mutable field of an existing beer.

        Raises:
            NotFoundError: beer_id does not exist (→ 404)
        """
        beer = await self._find_or_raise(beer_id)

        beer.beer_name = request.beer_name
        beer.beer_style = request.beer_style
        beer.upc = request.upc
        beer.quantity_on_hand = request.quantity_on_hand
        beer.price = request.price

        saved = await self.repository.save(beer)
        logger.info("Beer %s updated", beer_id)
        return self.mapper.to_dto(saved)

    async def patch_beer(self, beer_id: int, patch: BeerPatch) -> BeerDTO:
        """
        Merge the fields present in `patch` into an existing beer.

        Raises:
            NotFoundError: beer_id does not exist (→ 404)
        """
        beer = await self._find_or_raise(beer_id)

        if has_text(patch.beer_name):
            beer.beer_name = patch.beer_name
        if has_text(patch.beer_style):
            beer.beer_style = patch.beer_style
        if has_text(patch.upc):
            beer.upc = patch.upc
        if patch.quantity_on_hand is not None:
            beer.quantity_on_hand = patch.quantity_on_hand
        if patch.price is not None:
            beer.price = patch.price

        saved = await self.repository.save(beer)
        logger.info("Beer %s patched", beer_id)
        return self.mapper.to_dto(saved)

    async def delete_beer(self, beer_id: int) -> None:
        """
        Raises:
            NotFoundError: beer_id does not exist (→ 404)
        """
        await self._find_or_raise(beer_id)
        if not await self.repository.delete_by_id(beer_id):
            # Removed concurrently between the lookup and the delete
            raise NotFoundError(resource="beer", resource_id=beer_id)
        logger.info("Beer %s deleted", beer_id)

    async def _find_or_raise(self, beer_id: int) -> Beer:
        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            logger.debug("Beer %s not found", beer_id)
            raise NotFoundError(resource="beer", resource_id=beer_id)
        return beer
