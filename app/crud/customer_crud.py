# app/crud/customer_crud.py
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.db.models import Customer


class CustomerRepository(ABC):
    """Persistence gateway for Customer records."""

    @abstractmethod
    def find_all(self) -> List[Customer]:
        pass

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def exists_by_id(self, customer_id: int) -> bool:
        pass

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Inserts a customer without an id, otherwise updates every field."""
        pass

    @abstractmethod
    def delete_by_id(self, customer_id: int) -> None:
        pass

    @abstractmethod
    def delete_all(self) -> None:
        pass


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    Relational store. Writes are flushed into the caller's session; the
    request-scoped session (app.db.session.get_db) owns commit and rollback.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.id).all()

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def find_by_email(self, email: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.email == email).first()

    def exists_by_id(self, customer_id: int) -> bool:
        return self.db.query(Customer.id).filter(Customer.id == customer_id).first() is not None

    def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            self.db.add(customer)
            self.db.flush()
            self.db.refresh(customer)
            return customer

        db_customer = self.db.merge(customer)
        self.db.flush()
        return db_customer

    def delete_by_id(self, customer_id: int) -> None:
        self.db.query(Customer).filter(Customer.id == customer_id).delete(synchronize_session="fetch")
        self.db.flush()

    def delete_all(self) -> None:
        self.db.query(Customer).delete(synchronize_session="fetch")
        self.db.flush()


class InMemoryCustomerRepository(CustomerRepository):
    """
    Dict-backed store. Records are copied on the way in and out so a caller
    only changes stored state through save().

    One instance is shared by every request, and FastAPI runs sync endpoints
    in a threadpool, so all access to the dict and the id counter goes
    through a lock.
    """

    def __init__(self):
        self.customers: Dict[int, Customer] = {}
        self.next_id = 1
        self._lock = threading.Lock()

    @staticmethod
    def _copy(customer: Customer) -> Customer:
        return Customer.create(customer.name, customer.email, customer.address, id=customer.id)

    def find_all(self) -> List[Customer]:
        with self._lock:
            return [self._copy(customer) for customer in self.customers.values()]

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        with self._lock:
            customer = self.customers.get(customer_id)
            return self._copy(customer) if customer is not None else None

    def find_by_email(self, email: str) -> Optional[Customer]:
        with self._lock:
            for customer in self.customers.values():
                if customer.email == email:
                    return self._copy(customer)
        return None

    def exists_by_id(self, customer_id: int) -> bool:
        with self._lock:
            return customer_id in self.customers

    def save(self, customer: Customer) -> Customer:
        stored = self._copy(customer)
        with self._lock:
            if stored.id is None:
                stored.id = self.next_id
            self.next_id = max(self.next_id, stored.id + 1)
            self.customers[stored.id] = stored
            return self._copy(stored)

    def delete_by_id(self, customer_id: int) -> None:
        with self._lock:
            self.customers.pop(customer_id, None)

    def delete_all(self) -> None:
        with self._lock:
            self.customers.clear()
