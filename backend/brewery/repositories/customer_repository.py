from brewery.models.customer import Customer
from brewery.repositories.base import SQLAlchemyRepository


class CustomerRepository(SQLAlchemyRepository[Customer]):
    """Async CRUD access to the `customer` table."""

    model = Customer
