"""
Customer table state: debounced search, filter, sort and paging.

Each fetch carries a generation number. When inputs change again before a
fetch resolves, the older result is dropped and only the latest one is
committed to the table.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from ...config import CUSTOMER_PAGE_SIZE, SEARCH_DEBOUNCE_SECONDS
from ...database import SessionLocal
from .local_query import query_customers, total_pages
from .schemas import (
    CustomerQueryParams,
    CustomerQueryResult,
    CustomerSchema,
    SortDirection,
    SortField,
)
from .service import CustomerService

logger = logging.getLogger(__name__)

Fetcher = Callable[[CustomerQueryParams], Awaitable[CustomerQueryResult]]


def service_fetcher(session_factory=SessionLocal, page_size: int = CUSTOMER_PAGE_SIZE) -> Fetcher:
    """Fetcher backed by the database, each call runs in a worker thread with its own session"""

    def run_query(params: CustomerQueryParams) -> CustomerQueryResult:
        db = session_factory()
        try:
            return CustomerService(db).get_customers(params, page_size)
        finally:
            db.close()

    async def fetch(params: CustomerQueryParams) -> CustomerQueryResult:
        return await asyncio.to_thread(run_query, params)

    return fetch


def local_fetcher(customers: list[CustomerSchema], page_size: int = CUSTOMER_PAGE_SIZE) -> Fetcher:
    """Fetcher over an already loaded customer list"""

    async def fetch(params: CustomerQueryParams) -> CustomerQueryResult:
        return query_customers(customers, params, page_size)

    return fetch


class CustomerTableController:
    def __init__(
        self,
        fetcher: Fetcher,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
        page_size: int = CUSTOMER_PAGE_SIZE,
    ):
        self.fetcher = fetcher
        self.debounce_seconds = debounce_seconds
        self.page_size = page_size

        self.search_input = ""
        self.params = CustomerQueryParams()
        self.result = CustomerQueryResult.empty()
        self.loading = False

        self._generation = 0
        self._debounce_task: Optional[asyncio.Task] = None
        self._background: set[asyncio.Task] = set()

    @property
    def total_pages(self) -> int:
        return total_pages(self.result.total_count, self.page_size)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def refresh(self) -> bool:
        """
        Fetch the current page.

        Returns:
            True when the result was committed, False when a newer request
            superseded it while it was in flight.
        """
        self._generation += 1
        generation = self._generation
        params = self.params
        self.loading = True

        try:
            result = await self.fetcher(params)
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.debug(f"Dropping stale customer result (request {generation}, latest {self._generation})")
            return False

        self.result = result
        return True

    async def _update(self, **changes) -> bool:
        self.params = self.params.model_copy(update=changes)
        return await self.refresh()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def type_search(self, value: str) -> None:
        """Record a keystroke, the search is committed once typing pauses"""
        self.search_input = value
        if self._debounce_task is not None and not self._debounce_task.done():
            self._debounce_task.cancel()

        task = asyncio.get_running_loop().create_task(self._commit_search_later(value))
        self._debounce_task = task
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _commit_search_later(self, value: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Past this point a new keystroke no longer cancels the fetch
        self._debounce_task = None
        await self._update(search=value, page=1)

    async def settle(self) -> None:
        """Wait until pending debounced searches and their fetches have finished"""
        while self._background:
            results = await asyncio.gather(*list(self._background), return_exceptions=True)
            # Cancelled debounce timers are expected, fetch errors are not
            for result in results:
                if isinstance(result, Exception):
                    raise result

    # ------------------------------------------------------------------
    # Filter, sort and paging
    # ------------------------------------------------------------------

    async def set_filter_ort(self, ort: str) -> bool:
        return await self._update(filter_ort=ort, page=1)

    async def toggle_sort(self, field: SortField) -> bool:
        """Same field flips the direction, a new field starts ascending"""
        if field == self.params.sort_field:
            direction = (
                SortDirection.DESC
                if self.params.sort_direction == SortDirection.ASC
                else SortDirection.ASC
            )
        else:
            direction = SortDirection.ASC
        return await self._update(sort_field=field, sort_direction=direction, page=1)

    async def next_page(self) -> bool:
        if self.params.page >= self.total_pages:
            return False
        return await self._update(page=self.params.page + 1)

    async def previous_page(self) -> bool:
        if self.params.page <= 1:
            return False
        return await self._update(page=self.params.page - 1)
