# app/api/v1/routers/customers.py
from fastapi import APIRouter, Depends, status, Query
from pydantic import EmailStr
from typing import List

from app.api.v1.dependencies import get_customer_service
from app.schemas.customer_schemas import CustomerCreate, CustomerRead, CustomerPatch
from app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[CustomerRead])
def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    """List all customers."""
    return service.list_customers()


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer_details(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    """Get a single customer by their ID."""
    return service.get_customer_by_id(customer_id)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_200_OK)
def create_new_customer(
        payload: CustomerCreate,
        service: CustomerService = Depends(get_customer_service)
):
    """Create a new customer. Fails with 409 if the email is already taken."""
    return service.create_customer(payload)


@router.put("/{customer_id}", response_model=CustomerRead)
def update_existing_customer(
        customer_id: int,
        name: str | None = Query(None, min_length=1),
        email: EmailStr | None = Query(None),
        address: str | None = Query(None, min_length=1),
        service: CustomerService = Depends(get_customer_service)
):
    """
    Update a customer's details. Only the query parameters that are supplied
    are changed; the others keep their current value.
    """
    supplied = {"name": name, "email": email, "address": address}
    patch = CustomerPatch(**{field: value for field, value in supplied.items() if value is not None})
    return service.update_customer(customer_id, patch)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_existing_customer(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    """Delete a customer."""
    service.delete_customer(customer_id)
