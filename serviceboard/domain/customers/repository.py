"""Customer repository - Database operations for the master data table"""

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from ...models import Customer
from .schemas import ALL_ORTE, SortDirection, SortField

# Semantic sort field -> column name in the owner table
SORT_FIELD_TO_COLUMN = {
    SortField.EIGENTUEMER_NR: "EigentuemerNr",
    SortField.NACHNAME: "Nachname",
    SortField.VORNAME: "Vorname",
    SortField.ORT: "Ort",
    SortField.PLZ: "PLZ",
    SortField.EMAIL: "Email",
    SortField.TELEFON_NR: "TelefonNr",
}
DEFAULT_SORT_COLUMN = "Nachname"

SEARCH_COLUMNS = [
    "Nachname",
    "Vorname",
    "Firma",
    "EigentuemerNr",
    "Ort",
    "PLZ",
    "Email",
    "Strasse",
]
LIKE_ESCAPE = "\\"


def column(name: str):
    return Customer.__table__.c[name]


def escape_like(term: str) -> str:
    """Make LIKE wildcards in user input match literally"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class CustomerRepository:
    """Repository for customer database operations"""

    @staticmethod
    def build_search_query(
        db: Session,
        search: str = "",
        filter_ort: str = ALL_ORTE,
        sort_field: SortField = SortField.NACHNAME,
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> Query:
        """Filtered and ordered customer query, without pagination"""
        query = db.query(Customer)

        term = search.strip()
        if term:
            pattern = f"%{escape_like(term)}%"
            query = query.filter(
                or_(*(column(name).ilike(pattern, escape=LIKE_ESCAPE) for name in SEARCH_COLUMNS))
            )

        if filter_ort and filter_ort != ALL_ORTE:
            query = query.filter(Customer.ort == filter_ort)

        sort_column = column(SORT_FIELD_TO_COLUMN.get(sort_field, DEFAULT_SORT_COLUMN))
        if sort_direction == SortDirection.DESC:
            query = query.order_by(sort_column.desc())
        else:
            query = query.order_by(sort_column.asc())
        # Tie-breaker keeps offset/limit pages stable
        query = query.order_by(Customer.anl_id)

        return query

    @staticmethod
    def search_customers(
        db: Session,
        search: str = "",
        filter_ort: str = ALL_ORTE,
        sort_field: SortField = SortField.NACHNAME,
        sort_direction: SortDirection = SortDirection.ASC,
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[Customer], int]:
        """
        Search, filter, sort and paginate customers.
        Returns (page_rows, total_matching_count)
        """
        query = CustomerRepository.build_search_query(
            db, search, filter_ort, sort_field, sort_direction
        )
        total_count = query.order_by(None).count()

        offset = (page - 1) * page_size
        rows = query.offset(offset).limit(page_size).all()
        return rows, total_count

    @staticmethod
    def get_distinct_orte(db: Session) -> list[str]:
        """Distinct non-null localities, ordered"""
        rows = (
            db.query(Customer.ort)
            .filter(Customer.ort.isnot(None))
            .distinct()
            .order_by(Customer.ort)
            .all()
        )
        return [ort for (ort,) in rows]

    @staticmethod
    def count_customers(db: Session) -> int:
        return db.query(func.count(Customer.anl_id)).scalar() or 0
