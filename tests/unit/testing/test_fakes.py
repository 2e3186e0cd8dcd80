"""Unit tests for searchlight testing fakes and strategies."""

from __future__ import annotations

import keyword

from hypothesis import given

from searchlight.search import RESERVED_OPTION_NAMES, Search
from searchlight.testing import RecordingModel, RecordingQuery
from searchlight.testing.strategies import option_names


class TestRecordingQuery:
    def test_records_chained_calls(self) -> None:
        query = RecordingQuery()
        result = query.where(a=1).order_by("b")
        assert result is query
        assert query.called_methods == ["where", "order_by"]
        assert query.calls[1] == ("order_by", ("b",), {})

    def test_private_attributes_are_not_recorded(self) -> None:
        query = RecordingQuery()
        assert not hasattr(query, "_secret")
        assert query.calls == []


class TestRecordingModel:
    def test_class_call_starts_query(self) -> None:
        query = RecordingModel.where(kind="gold")
        assert isinstance(query, RecordingQuery)
        assert query.called_methods == ["where"]

    def test_each_call_starts_fresh(self) -> None:
        RecordingModel.where(a=1)
        assert RecordingModel.all().called_methods == ["all"]


class TestOptionNames:
    @given(option_names())
    def test_generated_names_are_declarable(self, name: str) -> None:
        assert name.isidentifier()
        assert not keyword.iskeyword(name)
        assert name not in RESERVED_OPTION_NAMES

        class GeneratedSearch(Search):
            pass

        GeneratedSearch.searches(name)
        assert GeneratedSearch(**{name: "v"}).options == {name: "v"}
