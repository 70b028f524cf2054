# app/db/models.py

from sqlalchemy import (
    Column,
    String,
    Integer,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    # Uniqueness is checked by CustomerService, not by the database.
    email = Column(String, nullable=False, index=True)
    # Country code, e.g. "US"
    address = Column(String, nullable=False)

    @classmethod
    def create(cls, name: str, email: str, address: str, id: int | None = None) -> "Customer":
        """
        Builds a customer. Leave `id` empty for a new record; the repository
        assigns it on first save.
        """
        customer = cls(name=name, email=email, address=address)
        if id is not None:
            customer.id = id
        return customer

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, name={self.name!r}, email={self.email!r}, address={self.address!r})"
