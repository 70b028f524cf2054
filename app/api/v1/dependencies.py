# app/api/v1/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings, Settings
from app.crud.customer_crud import CustomerRepository, SqlAlchemyCustomerRepository, InMemoryCustomerRepository
from app.db.session import get_db
from app.services.customer_service import CustomerService

# Process-wide store used when STORAGE_BACKEND is "memory".
in_memory_repository = InMemoryCustomerRepository()


def get_customer_repository(
        settings: Settings = Depends(get_settings),
        db: Session = Depends(get_db)
) -> CustomerRepository:
    """Picks the persistence gateway configured by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return in_memory_repository
    return SqlAlchemyCustomerRepository(db)


def get_customer_service(
        repository: CustomerRepository = Depends(get_customer_repository)
) -> CustomerService:
    return CustomerService(repository)
