"""Customer entity ↔ CustomerDTO conversion."""

from brewery.models.customer import Customer
from brewery.schemas.customer import CustomerDTO, CustomerRequest


class CustomerMapper:

    def to_dto(self, customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            id=customer.id,
            customer_name=customer.customer_name,
            created_date=customer.created_date,
            last_modified_date=customer.last_modified_date,
        )

    def to_entity(self, request: CustomerRequest) -> Customer:
        return Customer(customer_name=request.customer_name)
