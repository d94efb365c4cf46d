"""
Brewery Backend — Customer Route Handlers
===========================================

What:  HTTP boundary for /api/v2/customer; same contract as the beer routes.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from brewery.dependencies import get_customer_service
from brewery.routes.streaming import json_array_response
from brewery.schemas.common import ErrorResponse
from brewery.schemas.customer import CustomerDTO, CustomerPatch, CustomerRequest
from brewery.services.customer_service import CustomerService

CUSTOMER_PATH = "/api/v2/customer"

router = APIRouter(prefix=CUSTOMER_PATH, tags=["Customer"])

NOT_FOUND = {404: {"description": "Customer not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid payload", "model": ErrorResponse}}


@router.get("", response_model=List[CustomerDTO], summary="List all customers")
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    total = await service.count_customers()
    return await json_array_response(
        service.list_customers(),
        headers={"X-Total-Count": str(total)},
    )


@router.get(
    "/{customer_id}",
    response_model=CustomerDTO,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Get a customer by ID",
)
async def get_customer_by_id(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerDTO:
    return await service.get_customer_by_id(customer_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Create a customer",
)
async def create_customer(
    customer: CustomerRequest,
    request: Request,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    saved = await service.save_customer(customer)
    location = request.url_for("get_customer_by_id", customer_id=saved.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Replace a customer",
)
async def update_customer(
    customer_id: int,
    customer: CustomerRequest,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    await service.update_customer(customer_id, customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
    summary="Partially update a customer",
)
async def patch_customer(
    customer_id: int,
    customer: CustomerPatch,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    await service.patch_customer(customer_id, customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a customer",
)
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
