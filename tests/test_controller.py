"""Tests for the customer table controller (debounce and stale results)."""

import asyncio

from serviceboard.domain.customers.controller import (
    CustomerTableController,
    local_fetcher,
    service_fetcher,
)
from serviceboard.domain.customers.schemas import (
    CustomerQueryParams,
    CustomerQueryResult,
    CustomerSchema,
    SortDirection,
    SortField,
)


def rows(count):
    return [CustomerSchema(anl_id=i, nachname=f"Name{i:02d}", vorname="X") for i in range(count)]


class RecordingFetcher:
    def __init__(self, total_count=0):
        self.calls = []
        self.total_count = total_count

    async def __call__(self, params):
        self.calls.append(params)
        return CustomerQueryResult(data=[], total_count=self.total_count)


def test_search_is_debounced_to_last_keystroke():
    async def scenario():
        fetcher = RecordingFetcher()
        controller = CustomerTableController(fetcher, debounce_seconds=0.1)
        controller.params = controller.params.model_copy(update={"page": 4})

        for text in ("M", "Mü", "Mül"):
            controller.type_search(text)
            await asyncio.sleep(0.005)
        assert fetcher.calls == []

        await controller.settle()
        return controller, fetcher

    controller, fetcher = asyncio.run(scenario())
    assert len(fetcher.calls) == 1
    assert fetcher.calls[0].search == "Mül"
    assert fetcher.calls[0].page == 1
    assert controller.search_input == "Mül"


def test_stale_result_is_discarded():
    async def scenario():
        release = asyncio.Event()
        calls = []

        async def fetcher(params):
            calls.append(params)
            if len(calls) == 1:
                await release.wait()
                return CustomerQueryResult(data=[], total_count=99)
            return CustomerQueryResult(data=[], total_count=1)

        controller = CustomerTableController(fetcher, debounce_seconds=0)
        first = asyncio.create_task(controller.set_filter_ort("Berlin"))
        await asyncio.sleep(0)
        assert controller.loading

        second = await controller.set_filter_ort("Hamburg")
        release.set()
        first_committed = await first
        return controller, first_committed, second

    controller, first_committed, second = asyncio.run(scenario())
    assert first_committed is False
    assert second is True
    assert controller.result.total_count == 1
    assert controller.params.filter_ort == "Hamburg"
    assert controller.loading is False


def test_sorting_flips_direction_and_resets_page():
    async def scenario():
        controller = CustomerTableController(local_fetcher(rows(23)), page_size=10)
        await controller.refresh()
        await controller.next_page()
        assert controller.params.page == 2

        await controller.toggle_sort(SortField.NACHNAME)
        assert controller.params.sort_direction == SortDirection.DESC
        assert controller.params.page == 1
        assert controller.result.data[0].nachname == "Name22"

        await controller.toggle_sort(SortField.ORT)
        assert controller.params.sort_field == SortField.ORT
        assert controller.params.sort_direction == SortDirection.ASC

    asyncio.run(scenario())


def test_paging_is_clamped():
    async def scenario():
        controller = CustomerTableController(local_fetcher(rows(23)), page_size=10)
        await controller.refresh()
        assert controller.total_pages == 3
        assert await controller.previous_page() is False

        assert await controller.next_page()
        assert await controller.next_page()
        assert await controller.next_page() is False
        assert controller.params.page == 3
        assert len(controller.result.data) == 3

    asyncio.run(scenario())


def test_filter_change_resets_page():
    async def scenario():
        fetcher = RecordingFetcher(total_count=40)
        controller = CustomerTableController(fetcher)
        await controller.refresh()
        await controller.next_page()
        await controller.set_filter_ort("Berlin")
        return fetcher

    fetcher = asyncio.run(scenario())
    assert [c.page for c in fetcher.calls] == [1, 2, 1]
    assert fetcher.calls[-1].filter_ort == "Berlin"


def test_service_fetcher_runs_query_with_own_session(session_factory, customers):
    fetch = service_fetcher(session_factory, page_size=10)
    result = asyncio.run(fetch(CustomerQueryParams(filter_ort="Berlin")))
    assert sorted(c.anl_id for c in result.data) == [1, 3]
    assert result.total_count == 2
