"""
Brewery Backend — Customer API Tests
======================================

What:  End-to-end tests for /api/v2/customer, including the 3–255 name bounds.
"""

import pytest

CUSTOMER_PATH = "/api/v2/customer"


class TestCustomerApi:

    @pytest.mark.asyncio
    async def test_list_customers(self, test_client, seeded_customers):
        response = await test_client.get(CUSTOMER_PATH)

        assert response.status_code == 200
        assert response.headers["x-total-count"] == "3"
        assert [c["customerName"] for c in response.json()] == [
            "Customer 1", "Customer 2", "Customer 3",
        ]

    @pytest.mark.asyncio
    async def test_get_customer_by_id(self, test_client, seeded_customers):
        response = await test_client.get(f"{CUSTOMER_PATH}/{seeded_customers[0].id}")

        assert response.status_code == 200
        body = response.json()
        assert body["customerName"] == "Customer 1"
        assert set(body) == {"id", "customerName", "createdDate", "lastModifiedDate"}

    @pytest.mark.asyncio
    async def test_get_customer_not_found(self, test_client):
        response = await test_client.get(f"{CUSTOMER_PATH}/999")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_then_fetch_via_location(self, test_client):
        response = await test_client.post(CUSTOMER_PATH, json={"customerName": "New Customer"})

        assert response.status_code == 201
        fetched = await test_client.get(response.headers["location"])
        assert fetched.json()["customerName"] == "New Customer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [3, 255])
    async def test_create_name_at_bounds(self, test_client, length):
        response = await test_client.post(CUSTOMER_PATH, json={"customerName": "x" * length})
        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [2, 256])
    async def test_create_name_out_of_bounds(self, test_client, length):
        response = await test_client.post(CUSTOMER_PATH, json={"customerName": "x" * length})

        assert response.status_code == 400
        violations = response.json()["details"]["violations"]
        assert [v["field"] for v in violations] == ["customerName"]

    @pytest.mark.asyncio
    async def test_put_customer(self, test_client, seeded_customers):
        response = await test_client.put(f"{CUSTOMER_PATH}/1", json={"customerName": "Renamed"})

        assert response.status_code == 204
        assert (await test_client.get(f"{CUSTOMER_PATH}/1")).json()["customerName"] == "Renamed"

    @pytest.mark.asyncio
    async def test_put_customer_too_short(self, test_client, seeded_customers):
        response = await test_client.put(f"{CUSTOMER_PATH}/1", json={"customerName": "ab"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_put_unknown_customer(self, test_client):
        response = await test_client.put(f"{CUSTOMER_PATH}/999", json={"customerName": "Nobody"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_patch_customer(self, test_client, seeded_customers):
        response = await test_client.patch(f"{CUSTOMER_PATH}/2", json={"customerName": "Patched"})

        assert response.status_code == 204
        assert (await test_client.get(f"{CUSTOMER_PATH}/2")).json()["customerName"] == "Patched"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [2, 256])
    async def test_patch_name_out_of_bounds(self, test_client, seeded_customers, length):
        response = await test_client.patch(
            f"{CUSTOMER_PATH}/1", json={"customerName": "x" * length}
        )

        assert response.status_code == 400
        violations = response.json()["details"]["violations"]
        assert [v["field"] for v in violations] == ["customerName"]
        assert (await test_client.get(f"{CUSTOMER_PATH}/1")).json()["customerName"] == "Customer 1"

    @pytest.mark.asyncio
    async def test_patch_blank_name_leaves_value(self, test_client, seeded_customers):
        response = await test_client.patch(f"{CUSTOMER_PATH}/1", json={"customerName": " "})

        assert response.status_code == 204
        assert (await test_client.get(f"{CUSTOMER_PATH}/1")).json()["customerName"] == "Customer 1"

    @pytest.mark.asyncio
    async def test_patch_unknown_customer(self, test_client):
        response = await test_client.patch(f"{CUSTOMER_PATH}/999", json={"customerName": "Ghost"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_customer(self, test_client, seeded_customers):
        response = await test_client.delete(f"{CUSTOMER_PATH}/1")

        assert response.status_code == 204
        assert (await test_client.get(f"{CUSTOMER_PATH}/1")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_customer(self, test_client):
        response = await test_client.delete(f"{CUSTOMER_PATH}/999")
        assert response.status_code == 404
