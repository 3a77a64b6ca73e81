"""
In-memory variant of the customer query.

Used when the whole customer list is already loaded: filters by locality,
searches, sorts with German collation and cuts out one page. Produces the
same result shape as the database-backed service.
"""

import math
from functools import lru_cache
from typing import Iterable, Optional

from pyuca import Collator

from ...config import CUSTOMER_PAGE_SIZE
from .schemas import (
    ALL_ORTE,
    CustomerQueryParams,
    CustomerQueryResult,
    CustomerSchema,
    FilterOptions,
    SortDirection,
    SortField,
)

SORT_FIELD_TO_ATTRIBUTE = {
    SortField.EIGENTUEMER_NR: "eigentuemer_nr",
    SortField.NACHNAME: "nachname",
    SortField.VORNAME: "vorname",
    SortField.ORT: "ort",
    SortField.PLZ: "plz",
    SortField.EMAIL: "email",
    SortField.TELEFON_NR: "telefon_nr",
}

SEARCH_ATTRIBUTES = [
    "nachname",
    "vorname",
    "firma",
    "eigentuemer_nr",
    "ort",
    "plz",
    "email",
    "strasse",
]


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    """Unicode collator, loading the collation table is slow so it is shared"""
    return Collator()


def collation_key(value: Optional[str]) -> tuple:
    # Missing values sort like the empty string
    return get_collator().sort_key(value or "")


def total_pages(total_count: int, page_size: int = CUSTOMER_PAGE_SIZE) -> int:
    return max(1, math.ceil(total_count / page_size))


def matches_search(customer: CustomerSchema, term: str) -> bool:
    """Case-insensitive substring match over the searchable fields"""
    needle = term.casefold()
    for attribute in SEARCH_ATTRIBUTES:
        value = getattr(customer, attribute)
        if value and needle in value.casefold():
            return True
    return False


def distinct_orte(customers: Iterable[CustomerSchema]) -> list[str]:
    return sorted({c.ort for c in customers if c.ort}, key=collation_key)


def query_customers(
    customers: list[CustomerSchema],
    params: CustomerQueryParams,
    page_size: int = CUSTOMER_PAGE_SIZE,
) -> CustomerQueryResult:
    """Filter, search, sort and paginate an in-memory customer list"""
    rows = customers

    if params.filter_ort != ALL_ORTE:
        rows = [c for c in rows if c.ort == params.filter_ort]

    term = params.search.strip()
    if term:
        rows = [c for c in rows if matches_search(c, term)]

    attribute = SORT_FIELD_TO_ATTRIBUTE[params.sort_field]
    rows = sorted(
        rows,
        key=lambda c: collation_key(getattr(c, attribute)),
        reverse=params.sort_direction == SortDirection.DESC,
    )

    start = (params.page - 1) * page_size
    page_rows = rows[start : start + page_size]

    return CustomerQueryResult(
        data=page_rows,
        total_count=len(rows),
        filter_options=FilterOptions(orte=distinct_orte(customers)),
    )
