"""Tests for middle-page aggregation."""

from __future__ import annotations

import pytest

from pageorder.errors import PreconditionViolation
from pageorder.rules.aggregator import (
    BatchValidationResult,
    middle_element,
    sum_middle_of_compliant,
    summarize_updates,
)
from pageorder.rules.schema import OrderingRule
from pageorder.rules.store import ConstraintStore


class TestMiddleElement:
    def test_five(self):
        assert middle_element([75, 47, 61, 53, 29]) == 61

    def test_single(self):
        assert middle_element((4,)) == 4

    def test_even_length_raises(self):
        with pytest.raises(PreconditionViolation) as exc_info:
            middle_element([1, 2])
        assert exc_info.value.update == (1, 2)

    def test_empty_raises(self):
        with pytest.raises(PreconditionViolation):
            middle_element([])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            middle_element([1, 2, 3, 4])


class TestSumMiddleOfCompliant:
    def test_example(self, example_updates, example_store):
        assert sum_middle_of_compliant(example_updates, example_store) == 143

    def test_no_updates(self, example_store):
        assert sum_middle_of_compliant([], example_store) == 0

    def test_even_compliant_update_aborts(self):
        store = ConstraintStore.build([OrderingRule(before=1, after=2)])
        with pytest.raises(PreconditionViolation):
            sum_middle_of_compliant([(1, 2, 3), (1, 2)], store)

    def test_even_non_compliant_update_is_skipped(self):
        store = ConstraintStore.build([OrderingRule(before=1, after=2)])
        assert sum_middle_of_compliant([(1, 5, 2), (2, 1)], store) == 5


class TestSummarizeUpdates:
    def test_example(self, example_updates, example_store):
        r = summarize_updates(example_updates, example_store)
        assert r.total_checked == 6
        assert r.compliant_count == 3
        assert r.violations == 3
        assert r.middle_sum == 143
        assert r.passed is False
        assert [x.compliant for x in r.results] == [True, True, True, False, False, False]

    def test_all_compliant_passes(self, example_updates, example_store):
        r = summarize_updates(example_updates[:3], example_store)
        assert r.passed is True
        assert r.middle_sum == 61 + 53 + 29

    def test_matches_bare_sum(self, example_updates, example_store):
        assert (
            summarize_updates(example_updates, example_store).middle_sum
            == sum_middle_of_compliant(example_updates, example_store)
        )

    def test_json_dump(self, example_updates, example_store):
        dumped = summarize_updates(example_updates, example_store).model_dump(mode="json")
        assert dumped["middle_sum"] == 143
        assert dumped["results"][0]["update"] == [75, 47, 61, 53, 29]

    def test_empty_result_passes(self):
        assert BatchValidationResult(total_checked=0, compliant_count=0).passed is True
