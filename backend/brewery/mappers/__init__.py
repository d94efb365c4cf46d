# Mappers package init
"""
Brewery Backend — Entity ↔ DTO Mappers
========================================

What:  Stateless, field-for-field conversion between ORM entities and wire schemas.
Why:   Keeps the persisted shape and the exposed shape independent; services
       never hand an ORM object to the HTTP layer.
"""

from brewery.mappers.beer_mapper import BeerMapper
from brewery.mappers.customer_mapper import CustomerMapper

__all__ = ["BeerMapper", "CustomerMapper"]
