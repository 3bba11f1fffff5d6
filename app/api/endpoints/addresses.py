from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.db.session import get_db
from app.models.address import Address
from app.models.customer import Customer
from app.schemas.addresses import ADDRESS_FIELDS, AddressCreatedOut, AddressIn, AddressOut
from app.schemas.common import MessageOut, require_fields

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_MESSAGE = "Address details, city, state, and pin code are required"


def _get_address_or_404(db: Session, address_id: int) -> Address:
    address = db.get(Address, address_id)
    if not address:
        raise NotFoundError("Address not found")
    return address


@router.get("/customers/{customer_id}/addresses", response_model=list[AddressOut])
def list_addresses(customer_id: int, db: Session = Depends(get_db)):
    # Unknown customer just yields an empty list
    rows = db.scalars(
        select(Address).where(Address.customer_id == customer_id).order_by(Address.id.asc())
    ).all()
    return [AddressOut.model_validate(a) for a in rows]


@router.post("/customers/{customer_id}/addresses", response_model=AddressCreatedOut)
def create_address(customer_id: int, payload: AddressIn = AddressIn(), db: Session = Depends(get_db)):
    values = require_fields(payload, ADDRESS_FIELDS, REQUIRED_MESSAGE)

    if not db.get(Customer, customer_id):
        raise NotFoundError("Customer not found")

    address = Address(customer_id=customer_id, **values)
    db.add(address)
    db.commit()

    logger.info("Added address id=%s for customer id=%s", address.id, customer_id)
    return AddressCreatedOut(message="Address added successfully", address_id=address.id)


@router.put("/addresses/{address_id}", response_model=MessageOut)
def update_address(address_id: int, payload: AddressIn = AddressIn(), db: Session = Depends(get_db)):
    values = require_fields(payload, ADDRESS_FIELDS, REQUIRED_MESSAGE)
    address = _get_address_or_404(db, address_id)

    for k, v in values.items():
        setattr(address, k, v)
    # Always touch, even when nothing else changed
    address.updated_at = func.now()

    db.commit()

    logger.info("Updated address id=%s", address_id)
    return MessageOut(message="Address updated successfully")


@router.delete("/addresses/{address_id}", response_model=MessageOut)
def delete_address(address_id: int, db: Session = Depends(get_db)):
    address = _get_address_or_404(db, address_id)

    db.delete(address)
    db.commit()

    logger.info("Deleted address id=%s", address_id)
    return MessageOut(message="Address deleted successfully")
