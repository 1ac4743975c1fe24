"""Unit tests for the paginator.

Tests cover:
- Continuation tokens passed between pages
- page_size and max_items limits
- Request objects versus keyword arguments
- Async pagination
"""

from unittest.mock import AsyncMock, Mock

import pytest

from cumulus.runtime.paginator import Paginator, PaginatorModel
from cumulus.services.dynamodb.client import DynamoDBClient, LIST_TABLES
from cumulus.services.dynamodb.models import ListTablesRequest, ListTablesResponse

LIST_TABLES_PAGES = DynamoDBClient.paginators["list_tables"]


def pages():
    return [
        ListTablesResponse(table_names=["a", "b"], last_evaluated_table_name="b"),
        ListTablesResponse(table_names=["c", "d"], last_evaluated_table_name="d"),
        ListTablesResponse(table_names=["e"]),
    ]


@pytest.mark.unit
class TestPaginator:
    """Test suite for Paginator."""

    def test_follows_tokens_until_last_page(self):
        """Test every page is fetched and the token forwarded."""
        method = Mock(side_effect=pages())
        paginator = Paginator(method, LIST_TABLES_PAGES)

        result = list(paginator.paginate())

        assert len(result) == 3
        sent = [call.args[0] for call in method.call_args_list]
        assert [r.exclusive_start_table_name for r in sent] == [None, "b", "d"]

    def test_iter_results_flattens_items(self):
        """Test items of every page are yielded in order."""
        paginator = Paginator(Mock(side_effect=pages()), LIST_TABLES_PAGES)

        assert list(paginator.iter_results()) == ["a", "b", "c", "d", "e"]

    def test_max_items_stops_early(self):
        """Test no further page is requested once max_items were seen."""
        method = Mock(side_effect=pages())
        paginator = Paginator(method, LIST_TABLES_PAGES)

        items = list(paginator.iter_results(max_items=3))

        assert items == ["a", "b", "c"]
        assert method.call_count == 2

    def test_page_size_sets_limit(self):
        """Test page_size is written to the limit member."""
        method = Mock(side_effect=pages())
        paginator = Paginator(method, LIST_TABLES_PAGES)

        list(paginator.paginate(page_size=2))

        assert all(call.args[0].limit == 2 for call in method.call_args_list)

    def test_page_size_without_limit_key(self):
        """Test page_size is rejected when the operation has no limit."""
        model = PaginatorModel(
            operation=LIST_TABLES,
            input_token="exclusive_start_table_name",
            output_token="last_evaluated_table_name",
            result_key="table_names",
        )
        paginator = Paginator(Mock(), model)

        with pytest.raises(ValueError):
            list(paginator.paginate(page_size=10))

    def test_request_object_not_mutated(self):
        """Test the caller's request keeps its original token."""
        request = ListTablesRequest(limit=5)
        paginator = Paginator(Mock(side_effect=pages()), LIST_TABLES_PAGES)

        list(paginator.paginate(request))

        assert request.exclusive_start_table_name is None

    def test_request_and_kwargs_rejected(self):
        """Test mixing a request object with keyword arguments fails."""
        paginator = Paginator(Mock(), LIST_TABLES_PAGES)

        with pytest.raises(TypeError):
            list(paginator.paginate(ListTablesRequest(), limit=5))

    def test_single_page(self):
        """Test a response without a token ends pagination."""
        method = Mock(return_value=ListTablesResponse(table_names=["only"]))
        paginator = Paginator(method, LIST_TABLES_PAGES)

        assert list(paginator.iter_results()) == ["only"]
        method.assert_called_once()

    @pytest.mark.asyncio
    async def test_async_pagination(self):
        """Test async pagination forwards tokens and cancellation."""
        async_method = AsyncMock(side_effect=pages())
        paginator = Paginator(Mock(), LIST_TABLES_PAGES, async_method=async_method)

        items = [item async for item in paginator.iter_results_async()]

        assert items == ["a", "b", "c", "d", "e"]
        assert async_method.await_args_list[1].args[0].exclusive_start_table_name == "b"
        assert async_method.await_args_list[0].kwargs == {"cancellation": None}

    @pytest.mark.asyncio
    async def test_async_without_async_method(self):
        """Test async pagination needs an async method."""
        paginator = Paginator(Mock(), LIST_TABLES_PAGES)

        with pytest.raises(TypeError):
            async for _ in paginator.paginate_async():
                pass
