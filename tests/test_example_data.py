"""Unit tests for the example data source and lookup operation.

Replace these with tests for your own data operation when you swap the
fixture records for a real data source.
"""

from unittest.mock import AsyncMock, patch

import pytest

from core.example_data import (
    DATA_SOURCE_TAG,
    example_data_operation,
    filter_items,
    list_items,
)
from core.models import DataQuery


def _item_text(item) -> str:
    return f"{item.title} {item.description} {item.category}".lower()


class TestFilterItems:
    """Tests for the case-insensitive substring filter."""

    def test_no_filter_keeps_everything(self):
        assert filter_items(list_items(), None) == list_items()

    def test_empty_filter_keeps_everything(self):
        assert len(filter_items(list_items(), "")) == 3

    def test_filter_is_case_insensitive(self):
        lower = filter_items(list_items(), "sample")
        upper = filter_items(list_items(), "SAMPLE")
        assert [item.id for item in lower] == [item.id for item in upper] == ["1", "2"]

    def test_filter_matches_category(self):
        matched = filter_items(list_items(), "test")
        assert [item.id for item in matched] == ["3"]

    def test_filter_matches_inside_words(self):
        # "demo" is item 2's category and also part of "demonstration".
        matched = filter_items(list_items(), "demo")
        assert [item.id for item in matched] == ["1", "2"]

    def test_filter_matches_description(self):
        matched = filter_items(list_items(), "testing filters")
        assert [item.id for item in matched] == ["3"]

    def test_filter_without_matches(self):
        assert filter_items(list_items(), "no such thing") == []


class TestExampleDataOperation:
    """Tests for example_data_operation()."""

    @pytest.mark.asyncio
    async def test_returns_correct_structure(self, sample_query):
        result = await example_data_operation(sample_query, latency=0)

        assert isinstance(result.items, list)
        assert len(result.items) <= 5
        assert result.filters == sample_query

        payload = result.to_dict()
        assert set(payload) == {"items", "totalFound", "filters"}
        assert payload["filters"] == {
            "limit": 5,
            "filter": "sample",
            "includeMetadata": True,
        }

    @pytest.mark.asyncio
    async def test_filters_results(self):
        result = await example_data_operation(
            DataQuery(limit=10, filter="sample"), latency=0
        )

        assert result.items
        for item in result.items:
            assert "sample" in _item_text(item)

    @pytest.mark.asyncio
    async def test_sample_filter_with_limit_two(self):
        result = await example_data_operation(
            DataQuery(limit=2, filter="sample"), latency=0
        )

        assert len(result.items) <= 2
        assert result.total_found == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [1, 2, 3, 50, 100])
    async def test_applies_limit(self, limit):
        result = await example_data_operation(DataQuery(limit=limit), latency=0)

        assert len(result.items) <= limit

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [1, 2, 10])
    async def test_total_found_ignores_limit(self, limit):
        result = await example_data_operation(DataQuery(limit=limit), latency=0)

        assert result.total_found == 3

    @pytest.mark.asyncio
    async def test_includes_metadata_when_requested(self):
        result = await example_data_operation(
            DataQuery(limit=5, include_metadata=True), latency=0
        )

        for item in result.items:
            assert item.metadata is not None
            assert "processingTime" in item.metadata
            assert item.metadata["source"] == DATA_SOURCE_TAG

    @pytest.mark.asyncio
    async def test_metadata_is_merged_with_existing(self):
        result = await example_data_operation(
            DataQuery(limit=10, filter="Item 3", include_metadata=True), latency=0
        )

        (item,) = result.items
        assert item.metadata["tags"] == ["important", "featured"]
        assert item.metadata["source"] == DATA_SOURCE_TAG

    @pytest.mark.asyncio
    async def test_no_synthesized_metadata_by_default(self):
        result = await example_data_operation(DataQuery(limit=10), latency=0)

        for item in result.items:
            metadata = item.metadata or {}
            assert "processingTime" not in metadata
            assert "source" not in metadata

        # Item 3 keeps the metadata it already had.
        assert result.items[2].metadata == {"tags": ["important", "featured"]}

    @pytest.mark.asyncio
    async def test_fixture_records_are_not_mutated(self):
        before = [item.to_dict() for item in list_items()]

        await example_data_operation(
            DataQuery(limit=10, include_metadata=True), latency=0
        )

        assert [item.to_dict() for item in list_items()] == before

    @pytest.mark.asyncio
    async def test_awaits_simulated_latency(self):
        with patch("core.example_data.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await example_data_operation(DataQuery(), latency=0.1)

        sleep.assert_awaited_once_with(0.1)

    @pytest.mark.asyncio
    async def test_zero_latency_skips_sleep(self):
        with patch("core.example_data.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await example_data_operation(DataQuery(), latency=0)

        sleep.assert_not_awaited()
