# Repositories package init
"""
Brewery Backend — Repository Layer
====================================

Repository Inventory:
    - SQLAlchemyRepository: generic async CRUD over one ORM model
    - BeerRepository:       binds the `beer` table
    - CustomerRepository:   binds the `customer` table
"""

from brewery.repositories.base import SQLAlchemyRepository
from brewery.repositories.beer_repository import BeerRepository
from brewery.repositories.customer_repository import CustomerRepository

__all__ = ["SQLAlchemyRepository", "BeerRepository", "CustomerRepository"]
