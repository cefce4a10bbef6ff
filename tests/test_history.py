"""
Unit tests for app/services/history.py.

Covers: closed search-field set, case-insensitive substring search,
status filter, stable sorting in both directions, pagination metadata
and page reconstruction.
"""
import pytest

from app.models import TransactionRecord
from app.services.history import (
    SEARCH_FIELDS,
    filter_by_status,
    paginate,
    search_records,
    sort_records,
)


def rec(rid, amount=1000, status="succeeded", created=100, method="card", description=""):
    return TransactionRecord(
        id=rid, amount=amount, currency="eur", status=status,
        payment_method=method, created=created, description=description,
    )


RECORDS = [
    rec("pi_Alpha", amount=500, status="succeeded", created=100, method="card"),
    rec("pi_beta", amount=300, status="canceled", created=200, method="sepa_debit"),
    rec("pi_gamma", amount=700, status="succeeded", created=300, method="card",
        description="Blue T-shirt"),
    rec("pi_delta", amount=1500, status="processing", created=150, method="ideal"),
]


# ---------------------------------------------------------------------------
# search_records()
# ---------------------------------------------------------------------------
class TestSearch:
    def test_case_insensitive_substring_on_id(self):
        result = search_records(RECORDS, "id", "ALPHA")
        assert [r.id for r in result] == ["pi_Alpha"]

    def test_amount_is_matched_as_string(self):
        result = search_records(RECORDS, "amount", "00")
        assert [r.id for r in result] == ["pi_Alpha", "pi_beta", "pi_gamma", "pi_delta"]
        assert [r.id for r in search_records(RECORDS, "amount", "15")] == ["pi_delta"]

    def test_payment_method_field(self):
        result = search_records(RECORDS, "paymentMethod", "sepa")
        assert [r.id for r in result] == ["pi_beta"]

    def test_description_field(self):
        result = search_records(RECORDS, "description", "t-SHIRT")
        assert [r.id for r in result] == ["pi_gamma"]

    def test_unknown_field_yields_empty_list(self):
        assert search_records(RECORDS, "customer_email", "x") == []

    def test_empty_search_value_returns_everything(self):
        assert search_records(RECORDS, "id", "") == RECORDS

    def test_missing_field_returns_everything(self):
        assert search_records(RECORDS, None, "pi") == RECORDS

    def test_result_is_subset_and_every_match_contains_value(self):
        for field, accessor in SEARCH_FIELDS.items():
            result = search_records(RECORDS, field, "a")
            assert all(r in RECORDS for r in result)
            assert all("a" in accessor(r).lower() for r in result)


# ---------------------------------------------------------------------------
# filter_by_status()
# ---------------------------------------------------------------------------
class TestStatusFilter:
    def test_keeps_exact_status_only(self):
        result = filter_by_status(RECORDS, "succeeded")
        assert [r.id for r in result] == ["pi_Alpha", "pi_gamma"]

    def test_no_status_keeps_all(self):
        assert filter_by_status(RECORDS, None) == RECORDS


# ---------------------------------------------------------------------------
# sort_records()
# ---------------------------------------------------------------------------
class TestSort:
    def test_created_ascending_is_non_decreasing(self):
        result = sort_records(RECORDS, "created", "asc")
        created = [r.created for r in result]
        assert created == sorted(created)

    def test_desc_reverses_asc(self):
        asc = sort_records(RECORDS, "amount", "asc")
        desc = sort_records(RECORDS, "amount", "desc")
        assert [r.id for r in desc] == [r.id for r in reversed(asc)]

    def test_status_is_lexicographic(self):
        result = sort_records(RECORDS, "status", "asc")
        assert [r.status for r in result] == ["canceled", "processing", "succeeded", "succeeded"]

    def test_stable_for_equal_keys_in_both_directions(self):
        ties = [rec("pi_1", amount=5), rec("pi_2", amount=5), rec("pi_3", amount=1), rec("pi_4", amount=5)]
        asc = sort_records(ties, "amount", "asc")
        desc = sort_records(ties, "amount", "desc")
        assert [r.id for r in asc] == ["pi_3", "pi_1", "pi_2", "pi_4"]
        assert [r.id for r in desc] == ["pi_1", "pi_2", "pi_4", "pi_3"]

    def test_missing_order_keeps_fetch_order(self):
        assert sort_records(RECORDS, "amount", None) == RECORDS
        assert sort_records(RECORDS, None, "desc") == RECORDS


# ---------------------------------------------------------------------------
# paginate()
# ---------------------------------------------------------------------------
class TestPaginate:
    def test_first_page_metadata(self):
        items, state = paginate(RECORDS, page=1, limit=3)
        assert len(items) == 3
        assert state.total_items == 4
        assert state.total_pages == 2
        assert state.has_next_page is True
        assert state.has_previous_page is False

    def test_last_page_is_partial(self):
        items, state = paginate(RECORDS, page=2, limit=3)
        assert [r.id for r in items] == ["pi_delta"]
        assert state.has_next_page is False
        assert state.has_previous_page is True

    def test_out_of_range_page_is_empty_not_error(self):
        items, state = paginate(RECORDS, page=9, limit=3)
        assert items == []
        assert state.has_next_page is False
        assert state.has_previous_page is True

    def test_empty_list_has_zero_pages(self):
        items, state = paginate([], page=1, limit=6)
        assert items == []
        assert state.total_pages == 0
        assert state.has_next_page is False

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 5])
    def test_pages_concatenate_to_full_list(self, limit):
        _, first = paginate(RECORDS, page=1, limit=limit)
        rebuilt = []
        for page in range(1, first.total_pages + 1):
            items, state = paginate(RECORDS, page=page, limit=limit)
            assert len(items) <= limit
            assert state.has_next_page == (page * limit < len(RECORDS))
            rebuilt.extend(items)
        assert rebuilt == RECORDS
