from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

ADDRESS_FIELDS = ("address_details", "city", "state", "pin_code")


class AddressIn(BaseModel):
    # Pin codes sometimes arrive as numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    address_details: str | None = None
    city: str | None = None
    state: str | None = None
    pin_code: str | None = None


class AddressOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: int
    address_details: str
    city: str
    state: str
    pin_code: str
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class AddressCreatedOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    address_id: int = Field(alias="addressId")
