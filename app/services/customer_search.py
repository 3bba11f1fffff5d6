"""
List-customers query builder.

Search, city filter, sort and paging all come from the query string. Only
values are bound as parameters; the sort column and direction are looked up
in fixed tables so nothing from the request is spliced into SQL text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from app.core.errors import ValidationError
from app.models.customer import Customer

SORTABLE_COLUMNS = {
    "id": Customer.id,
    "first_name": Customer.first_name,
    "last_name": Customer.last_name,
    "phone_number": Customer.phone_number,
    "city": Customer.city,
    "created_at": Customer.created_at,
}

SORT_ORDERS = ("ASC", "DESC")

SEARCH_COLUMNS = (
    Customer.first_name,
    Customer.last_name,
    Customer.phone_number,
    Customer.city,
)


@dataclass
class CustomerListParams:
    page: int = 1
    limit: int = 10
    sort_by: str = "id"
    order: str = "ASC"
    search: str = ""
    city: str = ""

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class CustomerPage:
    page: int
    limit: int
    total_records: int
    customers: list[Customer] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_records / self.limit) if self.limit else 0


def _sort_clause(sort_by: str, order: str):
    # Blank means "not given"
    sort_by = (sort_by or "").strip() or "id"
    order = (order or "").strip() or "ASC"

    column = SORTABLE_COLUMNS.get(sort_by)
    if column is None:
        allowed = ", ".join(SORTABLE_COLUMNS)
        raise ValidationError(f"Invalid sortBy '{sort_by}'. Allowed: {allowed}")

    direction = order.upper()
    if direction not in SORT_ORDERS:
        raise ValidationError(f"Invalid order '{order}'. Allowed: ASC, DESC")

    return column.desc() if direction == "DESC" else column.asc()


def customer_filters(search: str = "", city: str = "") -> list:
    filters = []

    term = (search or "").strip()
    if term:
        pattern = f"%{term}%"
        filters.append(or_(*(col.ilike(pattern) for col in SEARCH_COLUMNS)))

    city = (city or "").strip()
    if city:
        filters.append(Customer.city == city)

    return filters


def build_count_statement(params: CustomerListParams) -> Select:
    return select(func.count()).select_from(Customer).where(*customer_filters(params.search, params.city))


def build_page_statement(params: CustomerListParams) -> Select:
    order_by = _sort_clause(params.sort_by, params.order)

    stmt = select(Customer).where(*customer_filters(params.search, params.city))

    # Tie-break on id so rows don't drift between pages
    if (params.sort_by or "").strip() not in ("", "id"):
        stmt = stmt.order_by(order_by, Customer.id.asc())
    else:
        stmt = stmt.order_by(order_by)

    return stmt.limit(params.limit).offset(params.offset)


def list_customers(db: Session, params: CustomerListParams) -> CustomerPage:
    # Build the page query first so a bad sort is rejected before any SQL runs
    page_stmt = build_page_statement(params)

    total = db.scalar(build_count_statement(params)) or 0
    rows = list(db.scalars(page_stmt).all())

    return CustomerPage(
        page=params.page,
        limit=params.limit,
        total_records=int(total),
        customers=rows,
    )
