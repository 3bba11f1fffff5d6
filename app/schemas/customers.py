from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.addresses import AddressOut

CUSTOMER_FIELDS = ("first_name", "last_name", "phone_number", "city")


class CustomerIn(BaseModel):
    """
    Body for POST and PUT. Fields are optional here so a missing one is
    reported as a 400 by the handler rather than a schema error.
    Numbers (older clients send the phone as one) are taken as text.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    city: str | None = None


class CustomerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    phone_number: str
    city: str
    created_at: dt.datetime | None = None


class CustomerDetailOut(CustomerOut):
    addresses: list[AddressOut] = []


class PaginationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current: int
    total: int
    limit: int
    total_records: int = Field(alias="totalRecords")


class CustomerPageOut(BaseModel):
    customers: list[CustomerOut]
    pagination: PaginationOut


class CustomerCreatedOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    customer_id: int = Field(alias="customerId")
