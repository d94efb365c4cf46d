"""
Brewery Backend — Customer Service Unit Tests
===============================================

What:  CustomerService against a mocked repository.
"""

from datetime import datetime, timezone

import pytest

from brewery.exceptions import NotFoundError
from brewery.mappers.customer_mapper import CustomerMapper
from brewery.models.customer import Customer
from brewery.schemas.customer import CustomerPatch, CustomerRequest
from brewery.services.customer_service import CustomerService


def make_customer(customer_id=1, name="Customer 1"):
    now = datetime.now(timezone.utc)
    return Customer(
        id=customer_id, customer_name=name,
        created_date=now, last_modified_date=now,
    )


class TestCustomerService:

    @pytest.fixture(autouse=True)
    def setup_service(self, mock_customer_repository):
        self.repository = mock_customer_repository
        self.service = CustomerService(self.repository, CustomerMapper())

    @pytest.mark.asyncio
    async def test_get_customer_found(self):
        self.repository.find_by_id.return_value = make_customer()

        result = await self.service.get_customer_by_id(1)

        assert result.customer_name == "Customer 1"

    @pytest.mark.asyncio
    async def test_get_customer_not_found(self):
        with pytest.raises(NotFoundError, match="Customer with ID '5' was not found"):
            await self.service.get_customer_by_id(5)

    @pytest.mark.asyncio
    async def test_list_customers(self):
        async def find_all():
            yield make_customer(1, "Alpha")
            yield make_customer(2, "Beta")

        self.repository.find_all = find_all

        names = [dto.customer_name async for dto in self.service.list_customers()]

        assert names == ["Alpha", "Beta"]

    @pytest.mark.asyncio
    async def test_save_customer(self):
        result = await self.service.save_customer(CustomerRequest(customer_name="New Customer"))

        saved_entity = self.repository.save.await_args.args[0]
        assert saved_entity.id is None
        assert result.customer_name == "New Customer"

    @pytest.mark.asyncio
    async def test_update_customer_replaces_name(self):
        self.repository.find_by_id.return_value = make_customer()

        result = await self.service.update_customer(1, CustomerRequest(customer_name="Renamed"))

        assert result.id == 1
        assert result.customer_name == "Renamed"

    @pytest.mark.asyncio
    async def test_update_customer_not_found(self):
        with pytest.raises(NotFoundError):
            await self.service.update_customer(9, CustomerRequest(customer_name="Nobody"))
        self.repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_patch_customer_applies_non_blank_name(self):
        self.repository.find_by_id.return_value = make_customer()

        result = await self.service.patch_customer(1, CustomerPatch(customer_name="Patched"))

        assert result.customer_name == "Patched"

    @pytest.mark.asyncio
    async def test_patch_customer_ignores_blank_name(self):
        self.repository.find_by_id.return_value = make_customer()

        result = await self.service.patch_customer(1, CustomerPatch(customer_name="  "))

        assert result.customer_name == "Customer 1"

    @pytest.mark.asyncio
    async def test_patch_customer_not_found(self):
        with pytest.raises(NotFoundError):
            await self.service.patch_customer(3, CustomerPatch(customer_name="Ghost"))

    @pytest.mark.asyncio
    async def test_delete_customer(self):
        self.repository.find_by_id.return_value = make_customer()

        await self.service.delete_customer(1)

        self.repository.delete_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_delete_customer_not_found(self):
        with pytest.raises(NotFoundError):
            await self.service.delete_customer(1)
        self.repository.delete_by_id.assert_not_awaited()
