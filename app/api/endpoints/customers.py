from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import ConflictError, NotFoundError
from app.db.session import get_db
from app.models.customer import Customer
from app.schemas.common import MessageOut, require_fields
from app.schemas.customers import (
    CUSTOMER_FIELDS,
    CustomerCreatedOut,
    CustomerDetailOut,
    CustomerIn,
    CustomerOut,
    CustomerPageOut,
    PaginationOut,
)
from app.services import customer_search
from app.services.phone import normalize_phone

logger = logging.getLogger(__name__)

router = APIRouter()


# ----------------------------
# Helpers
# ----------------------------

def _get_customer_or_404(db: Session, customer_id: int) -> Customer:
    customer = db.get(Customer, customer_id)
    if not customer:
        raise NotFoundError("Customer not found")
    return customer


def _customer_values(payload: CustomerIn) -> dict[str, str]:
    values = require_fields(payload, CUSTOMER_FIELDS, "All fields are required")
    values["phone_number"] = normalize_phone(values["phone_number"])
    return values


def _phone_taken(db: Session, phone_number: str, exclude_id: int) -> bool:
    stmt = select(Customer.id).where(Customer.phone_number == phone_number, Customer.id != exclude_id).limit(1)
    return db.scalar(stmt) is not None


def _commit_or_conflict(db: Session, message: str) -> None:
    """
    Commit, turning the phone_number unique constraint into a 400.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(message) from e


# ----------------------------
# Endpoints
# ----------------------------

@router.get("", response_model=CustomerPageOut)
def list_customers(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort_by: str = Query("id", alias="sortBy"),
    order: str = Query("ASC"),
    search: str = Query(""),
    city: str = Query(""),
    db: Session = Depends(get_db),
):
    """
    Paged customer list with optional search (name, phone or city) and exact city filter.
    """
    params = customer_search.CustomerListParams(
        page=page,
        limit=limit,
        sort_by=sort_by,
        order=order,
        search=search,
        city=city,
    )
    result = customer_search.list_customers(db, params)

    return CustomerPageOut(
        customers=[CustomerOut.model_validate(c) for c in result.customers],
        pagination=PaginationOut(
            current=result.page,
            total=result.total_pages,
            limit=result.limit,
            total_records=result.total_records,
        ),
    )


@router.get("/{customer_id}", response_model=CustomerDetailOut)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = _get_customer_or_404(db, customer_id)
    return CustomerDetailOut.model_validate(customer)


@router.post("", response_model=CustomerCreatedOut)
def create_customer(payload: CustomerIn = CustomerIn(), db: Session = Depends(get_db)):
    values = _customer_values(payload)

    customer = Customer(**values)
    db.add(customer)
    _commit_or_conflict(db, "Phone number already exists")

    logger.info("Created customer id=%s", customer.id)
    return CustomerCreatedOut(message="Customer created successfully", customer_id=customer.id)


@router.put("/{customer_id}", response_model=MessageOut)
def update_customer(customer_id: int, payload: CustomerIn = CustomerIn(), db: Session = Depends(get_db)):
    values = _customer_values(payload)

    # Uniqueness is reported ahead of a missing id; the constraint still covers races
    if _phone_taken(db, values["phone_number"], customer_id):
        raise ConflictError("Phone number already exists for another customer")

    customer = _get_customer_or_404(db, customer_id)

    # Full replace
    for k, v in values.items():
        setattr(customer, k, v)

    _commit_or_conflict(db, "Phone number already exists for another customer")

    logger.info("Updated customer id=%s", customer_id)
    return MessageOut(message="Customer updated successfully")


@router.delete("/{customer_id}", response_model=MessageOut)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = _get_customer_or_404(db, customer_id)

    # Addresses go with it (ON DELETE CASCADE)
    db.delete(customer)
    db.commit()

    logger.info("Deleted customer id=%s", customer_id)
    return MessageOut(message="Customer deleted successfully")
