"""
Brewery Backend — API Dependencies
====================================

What:  FastAPI dependency callables that hand the assembled services to routes.
Why:   Services are built once in `create_app()` with their repositories and
       mappers passed in explicitly; routes only ask for them by type.
How:   Each callable reads the instance stored on `request.app.state`.
       Tests can replace one with `app.dependency_overrides[...]`.

Example usage in a route:
    @router.get("/beer/{beer_id}")
    async def get_beer_by_id(beer_id: int, service: BeerService = Depends(get_beer_service)):
        return await service.get_beer_by_id(beer_id)
"""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from brewery.services.beer_service import BeerService
from brewery.services.customer_service import CustomerService


def get_beer_service(request: Request) -> BeerService:
    return request.app.state.beer_service


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service


def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine
