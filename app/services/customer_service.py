# app/services/customer_service.py
from typing import List

from app.core.exceptions import CustomerNotFoundError, EmailUnavailableError
from app.core.logging import get_logger
from app.crud.customer_crud import CustomerRepository
from app.db.models import Customer
from app.schemas.customer_schemas import CustomerCreate, CustomerPatch

logger = get_logger(__name__)


class CustomerService:
    """
    Business rules for customers: email addresses are unique, updates are
    partial, and unknown ids are reported as CustomerNotFoundError.

    Every mutating call writes through the repository exactly once when it
    succeeds and not at all when it fails.
    """

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def list_customers(self) -> List[Customer]:
        return self.repository.find_all()

    def get_customer_by_id(self, customer_id: int) -> Customer:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(
                f"Customer with id {customer_id} not found.", customer_id=customer_id
            )
        return customer

    def create_customer(self, customer_in: CustomerCreate) -> Customer:
        if self.repository.find_by_email(customer_in.email) is not None:
            logger.warning(f"Rejected customer creation, email {customer_in.email} is taken")
            raise EmailUnavailableError(
                f"The email {customer_in.email} is unavailable.", email=customer_in.email
            )

        customer = self.repository.save(
            Customer.create(customer_in.name, customer_in.email, customer_in.address)
        )
        logger.info(f"Created customer {customer.id}")
        return customer

    def update_customer(self, customer_id: int, patch: CustomerPatch) -> Customer:
        """
        Applies the fields set on `patch` that differ from the stored record.
        The record is only saved when at least one field actually changes.
        """
        customer = self.get_customer_by_id(customer_id)

        staged = {
            field: value
            for field, value in patch.changes().items()
            if getattr(customer, field) != value
        }

        if "email" in staged:
            holder = self.repository.find_by_email(staged["email"])
            if holder is not None and holder.id != customer.id:
                logger.warning(f"Rejected update of customer {customer_id}, email {staged['email']} is taken")
                raise EmailUnavailableError(
                    f'The email "{staged["email"]}" is unavailable to update.', email=staged["email"]
                )

        if not staged:
            logger.info(f"Customer {customer_id} unchanged, nothing to save")
            return customer

        for field, value in staged.items():
            setattr(customer, field, value)

        customer = self.repository.save(customer)
        logger.info(f"Updated customer {customer_id}: {', '.join(sorted(staged))}")
        return customer

    def delete_customer(self, customer_id: int) -> None:
        if not self.repository.exists_by_id(customer_id):
            raise CustomerNotFoundError(
                f"Customer with id {customer_id} does not exist.", customer_id=customer_id
            )

        self.repository.delete_by_id(customer_id)
        logger.info(f"Deleted customer {customer_id}")
