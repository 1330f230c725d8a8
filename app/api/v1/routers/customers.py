# app/api/v1/routers/customers.py
from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.orm import Session
from typing import Annotated, List

from app.core.errors import CustomerNotFoundError
from app.core.logging import get_logger
from app.crud import customer_crud
from app.db.session import get_db
from app.schemas.customer_schemas import (
    CUSTOMER_ID_MAX,
    CUSTOMER_ID_MIN,
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
)
from app.utils.decorators import log_request

logger = get_logger(__name__)

router = APIRouter()

NOT_FOUND_ON_READ = "Customer not found."
NOT_FOUND_ON_WRITE = "Couldn't find customer."

CustomerId = Annotated[int, Path(ge=CUSTOMER_ID_MIN, le=CUSTOMER_ID_MAX)]

_not_found_response = {
    status.HTTP_400_BAD_REQUEST: {
        "description": "Customer couldn't be found",
        "content": {"text/plain": {"schema": {"type": "string"}}},
    }
}


@router.get("", response_model=List[CustomerRead])
@log_request
def get_all_customers(db: Session = Depends(get_db)):
    """Lists all registered customers."""
    return customer_crud.list_customers(db)


@router.get("/{customer_id}", response_model=CustomerRead, responses=_not_found_response)
@log_request
def get_customer_details(customer_id: CustomerId, db: Session = Depends(get_db)):
    """Finds a specific customer."""
    db_customer = customer_crud.get_customer_by_id(db, customer_id=customer_id)
    if db_customer is None:
        logger.warning(f"Customer {customer_id} not found")
        raise CustomerNotFoundError(NOT_FOUND_ON_READ)
    return db_customer


@router.post(
    "",
    response_model=CustomerRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Probably an insertion error"}},
)
@log_request
def create_new_customer(
        payload: CustomerCreate,
        request: Request,
        response: Response,
        db: Session = Depends(get_db)
):
    """
    Creates a new customer with the caller-supplied id.

    The row is committed before the 201 is returned. A duplicate id is a store
    error and is answered with a 500.
    """
    db_customer = customer_crud.add_customer(db, customer_in=payload)
    customer_crud.save(db)
    logger.info(f"Created customer {db_customer.id}")

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{db_customer.id}"
    return db_customer


@router.put("", response_model=List[CustomerRead], responses=_not_found_response)
@log_request
def update_existing_customer(payload: CustomerUpdate, db: Session = Depends(get_db)):
    """Replaces a customer's name, email and phone. Returns all customers."""
    db_customer = customer_crud.get_customer_by_id(db, customer_id=payload.id)
    if db_customer is None:
        logger.warning(f"Update skipped, customer {payload.id} not found")
        raise CustomerNotFoundError(NOT_FOUND_ON_WRITE)

    customer_crud.update_customer(db, db_customer=db_customer, customer_in=payload)
    customer_crud.save(db)
    logger.info(f"Updated customer {payload.id}")
    return customer_crud.list_customers(db)


@router.delete("/{customer_id}", response_model=List[CustomerRead], responses=_not_found_response)
@log_request
def delete_existing_customer(customer_id: CustomerId, db: Session = Depends(get_db)):
    """Deletes a customer. Returns the remaining customers."""
    db_customer = customer_crud.get_customer_by_id(db, customer_id=customer_id)
    if db_customer is None:
        logger.warning(f"Delete skipped, customer {customer_id} not found")
        raise CustomerNotFoundError(NOT_FOUND_ON_WRITE)

    customer_crud.remove_customer(db, db_customer=db_customer)
    customer_crud.save(db)
    logger.info(f"Deleted customer {customer_id}")
    return customer_crud.list_customers(db)
