# app/crud/customer_crud.py
from sqlalchemy.orm import Session

from app.db.models import Customer
from app.schemas.customer_schemas import CustomerCreate, CustomerUpdate


def list_customers(db: Session) -> list[Customer]:
    """Fetches every customer, ordered by id. No pagination."""
    return db.query(Customer).order_by(Customer.id).all()


def get_customer_by_id(db: Session, customer_id: int) -> Customer | None:
    """Fetches a single customer by its ID, or None if there is none."""
    return db.get(Customer, customer_id)


def add_customer(db: Session, customer_in: CustomerCreate) -> Customer:
    """
    Stages a new customer row. Nothing reaches the database until `save`;
    a duplicate id surfaces there as an IntegrityError.
    """
    db_customer = Customer(**customer_in.model_dump())
    db.add(db_customer)
    return db_customer


def update_customer(db: Session, db_customer: Customer, customer_in: CustomerUpdate) -> Customer:
    """Overwrites name, email and phone. The id never changes."""
    update_data = customer_in.model_dump(exclude={"id"})
    for key, value in update_data.items():
        setattr(db_customer, key, value)

    return db_customer


def remove_customer(db: Session, db_customer: Customer):
    """Marks a previously fetched customer for deletion."""
    db.delete(db_customer)


def save(db: Session):
    """
    Commits all pending changes as one unit of work.
    The session is rolled back on failure and the store error re-raised as is.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
