"""Tests for the pure filter-state helpers used by the table client."""

from table_client.filter_state import has_active_filters, merge_filters, next_sort, sort_indicator


def test_merge_overlays_and_resets_page():
    current = {"search": "web", "status": "actief", "page": 4, "per_page": 25}
    assert merge_filters(current, {"status": "voltooid"}) == {
        "search": "web", "status": "voltooid", "page": 1, "per_page": 25,
    }


def test_merge_keeps_explicit_page():
    assert merge_filters({"sort_by": "name"}, {"page": 3}) == {"sort_by": "name", "page": 3}


def test_merge_drops_empty_values():
    current = {"search": "web", "status": "", "priority": None, "sort_by": "name"}
    assert merge_filters(current, {"search": None}) == {"sort_by": "name", "page": 1}


def test_merge_does_not_mutate_current():
    current = {"search": "web"}
    merge_filters(current, {"search": None, "page": 2})
    assert current == {"search": "web"}


def test_sort_toggles_on_active_column():
    assert next_sort({"sort_by": "name", "sort_direction": "asc"}, "name") == {
        "sort_by": "name", "sort_direction": "desc",
    }
    assert next_sort({"sort_by": "name", "sort_direction": "desc"}, "name")["sort_direction"] == "asc"


def test_sort_on_new_column_starts_ascending():
    assert next_sort({"sort_by": "name", "sort_direction": "asc"}, "budget") == {
        "sort_by": "budget", "sort_direction": "asc",
    }
    assert next_sort({}, "budget")["sort_direction"] == "asc"


def test_sort_indicator():
    current = {"sort_by": "name", "sort_direction": "asc"}
    assert sort_indicator(current, "name") == "asc"
    assert sort_indicator(current, "budget") == "none"
    assert sort_indicator({"sort_by": "name"}, "name") == "desc"


def test_active_filters():
    assert not has_active_filters({"sort_by": "name", "per_page": 25}, ["status"])
    assert has_active_filters({"search": "x"})
    assert has_active_filters({"status": "actief"}, ["status", "priority"])
    assert not has_active_filters({"status": "actief"})
