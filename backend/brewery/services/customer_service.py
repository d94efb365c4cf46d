"""
Brewery Backend — Customer Service
====================================

What:  Business rules for the customer resource.
How:   Same shape as BeerService: repository for persistence, mapper for
       entity ↔ DTO, NotFoundError for unknown ids.

PUT replaces the name; PATCH applies it only when it is non-blank. Length
rules (3–255) are enforced on CustomerRequest and CustomerPatch at the HTTP
boundary.
"""

import logging
from typing import AsyncIterator

from brewery.exceptions import NotFoundError
from brewery.mappers.customer_mapper import CustomerMapper
from brewery.models.customer import Customer
from brewery.repositories.customer_repository import CustomerRepository
from brewery.schemas.customer import CustomerDTO, CustomerPatch, CustomerRequest
from brewery.services.merge import has_text

logger = logging.getLogger(__name__)


class CustomerService:

    def __init__(self, repository: CustomerRepository, mapper: CustomerMapper):
        self.repository = repository
        self.mapper = mapper

    async def list_customers(self) -> AsyncIterator[CustomerDTO]:
        async for customer in self.repository.find_all():
            yield self.mapper.to_dto(customer)

    async def count_customers(self) -> int:
        return await self.repository.count()

    async def get_customer_by_id(self, customer_id: int) -> CustomerDTO:
        customer = await self._find_or_raise(customer_id)
        return self.mapper.to_dto(customer)

    async def save_customer(self, request: CustomerRequest) -> CustomerDTO:
        saved = await self.repository.save(self.mapper.to_entity(request))
        logger.info("Customer %s created", saved.id)
        return self.mapper.to_dto(saved)

    async def update_customer(self, customer_id: int, request: CustomerRequest) -> CustomerDTO:
        customer = await self._find_or_raise(customer_id)
        customer.customer_name = request.customer_name

        saved = await self.repository.save(customer)
        logger.info("Customer %s updated", customer_id)
        return self.mapper.to_dto(saved)

    async def patch_customer(self, customer_id: int, patch: CustomerPatch) -> CustomerDTO:
        customer = await self._find_or_raise(customer_id)
        if has_text(patch.customer_name):
            customer.customer_name = patch.customer_name

        saved = await self.repository.save(customer)
        logger.info("Customer %s patched", customer_id)
        return self.mapper.to_dto(saved)

    async def delete_customer(self, customer_id: int) -> None:
        await self._find_or_raise(customer_id)
        if not await self.repository.delete_by_id(customer_id):
            raise NotFoundError(resource="customer", resource_id=customer_id)
        logger.info("Customer %s deleted", customer_id)

    async def _find_or_raise(self, customer_id: int) -> Customer:
        customer = await self.repository.find_by_id(customer_id)
        if customer is None:
            logger.debug("Customer %s not found", customer_id)
            raise NotFoundError(resource="customer", resource_id=customer_id)
        return customer
