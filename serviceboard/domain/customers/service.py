"""Customer service - Business logic for the master data table"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import CUSTOMER_PAGE_SIZE
from .repository import CustomerRepository
from .schemas import CustomerQueryParams, CustomerQueryResult, CustomerSchema, FilterOptions

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customer queries"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepository()

    def get_customers(
        self, params: CustomerQueryParams, page_size: int = CUSTOMER_PAGE_SIZE
    ) -> CustomerQueryResult:
        """
        Search, filter, sort and paginate customers.

        Store failures are logged and reported as an empty result so the
        table keeps rendering.
        """
        try:
            rows, total_count = self.repo.search_customers(
                self.db,
                search=params.search,
                filter_ort=params.filter_ort,
                sort_field=params.sort_field,
                sort_direction=params.sort_direction,
                page=params.page,
                page_size=page_size,
            )
            # Filter options are queried after the page, the session is not shared across threads
            orte = self.repo.get_distinct_orte(self.db)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error fetching customers: {e}")
            return CustomerQueryResult.empty()

        return CustomerQueryResult(
            data=[CustomerSchema.model_validate(row) for row in rows],
            total_count=total_count,
            filter_options=FilterOptions(orte=orte),
        )

    def get_filter_options(self) -> FilterOptions:
        try:
            return FilterOptions(orte=self.repo.get_distinct_orte(self.db))
        except SQLAlchemyError as e:
            logger.error(f"❌ Error fetching filter options: {e}")
            return FilterOptions(orte=[])

    def get_customer_count(self) -> int:
        """Total number of customers, unfiltered"""
        try:
            return self.repo.count_customers(self.db)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error counting customers: {e}")
            return 0
