from uuid import UUID

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from db.session import get_db
from models import Customer


class CustomerRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, customer_id: UUID) -> Customer | None:
        return self.db.get(Customer, customer_id)

    def exists(self, customer_id: UUID) -> bool:
        return self.get_by_id(customer_id) is not None

    def get_by_email(self, email: str) -> Customer | None:
        return self.db.scalar(select(Customer).where(Customer.email == email))

    def create(self, name: str, email: str) -> Customer:
        customer = Customer(name=name, email=email)

        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)

        return customer


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    return CustomerRepository(db)
