"""Beer entity ↔ BeerDTO conversion."""

from brewery.models.beer import Beer
from brewery.schemas.beer import BeerDTO, BeerRequest


class BeerMapper:

    def to_dto(self, beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            beer_name=beer.beer_name,
            beer_style=beer.beer_style,
            upc=beer.upc,
            quantity_on_hand=beer.quantity_on_hand,
            price=beer.price,
            created_date=beer.created_date,
            last_modified_date=beer.last_modified_date,
        )

    def to_entity(self, request: BeerRequest) -> Beer:
        """New, unsaved entity; id and timestamps are left to the persistence layer."""
        return Beer(
            beer_name=request.beer_name,
            beer_style=request.beer_style,
            upc=request.upc,
            quantity_on_hand=request.quantity_on_hand,
            price=request.price,
        )
