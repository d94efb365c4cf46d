from brewery.models.beer import Beer
from brewery.repositories.base import SQLAlchemyRepository


class BeerRepository(SQLAlchemyRepository[Beer]):
    """Async CRUD access to the `beer` table."""

    model = Beer
