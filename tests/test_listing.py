from types import SimpleNamespace

from services.listing import filter_records, sort_records, paginate


def record(name, city="", specialization="General", rank=None):
    return SimpleNamespace(name=name, city=city, specialization=specialization, rank=rank)


RECORDS = [
    record("Asha Verma", "Pune", "Cardiology", 2),
    record("Ben Okafor", "Lagos", "Neurology", 1),
    record("Chen Wei", "PUNE", "Cardiology", 2),
    record("Dana Ruiz", "Madrid", "Pediatrics", None),
    record("asha menon", "Kochi", "Neurology", 3),
]


def names(records):
    return [r.name for r in records]


def test_search_is_case_insensitive_across_fields():
    result = filter_records(RECORDS, "pune", ("name", "city"))

    assert names(result) == ["Asha Verma", "Chen Wei"]


def test_search_matches_any_field():
    result = filter_records(RECORDS, "ASHA", ("name", "city"))

    assert names(result) == ["Asha Verma", "asha menon"]


def test_search_fields_may_be_callables():
    result = filter_records(RECORDS, "cardio", (lambda r: r.specialization,))

    assert names(result) == ["Asha Verma", "Chen Wei"]


def test_empty_search_keeps_everything():
    assert filter_records(RECORDS, "", ("name",)) == RECORDS
    assert filter_records(RECORDS, None, ("name",)) == RECORDS


def test_category_predicate_is_combined_with_search():
    result = filter_records(
        RECORDS, "asha", ("name",), lambda r: r.specialization == "Neurology"
    )

    assert names(result) == ["asha menon"]


def test_filtering_is_idempotent_and_leaves_source_alone():
    source = list(RECORDS)
    once = filter_records(source, "a", ("name", "city"), lambda r: r.rank != 1)
    twice = filter_records(once, "a", ("name", "city"), lambda r: r.rank != 1)

    assert once == twice
    assert source == RECORDS


def test_sort_ascending_keeps_ties_in_source_order():
    result = sort_records(RECORDS, lambda r: r.specialization)

    assert names(result) == ["Asha Verma", "Chen Wei", "Ben Okafor", "asha menon", "Dana Ruiz"]


def test_sort_descending_keeps_ties_in_source_order():
    result = sort_records(RECORDS, lambda r: r.specialization, "desc")

    assert names(result) == ["Dana Ruiz", "Ben Okafor", "asha menon", "Asha Verma", "Chen Wei"]


def test_unknown_order_sorts_ascending():
    assert sort_records(RECORDS, lambda r: r.name.lower(), "sideways") == \
        sort_records(RECORDS, lambda r: r.name.lower(), "asc")


def test_missing_keys_sort_last_either_way():
    ascending = sort_records(RECORDS, lambda r: r.rank)
    descending = sort_records(RECORDS, lambda r: r.rank, "desc")

    assert names(ascending) == ["Ben Okafor", "Asha Verma", "Chen Wei", "asha menon", "Dana Ruiz"]
    assert names(descending) == ["asha menon", "Asha Verma", "Chen Wei", "Ben Okafor", "Dana Ruiz"]


def test_sorting_is_idempotent():
    for order in ("asc", "desc"):
        for key in (lambda r: r.rank, lambda r: r.city.lower(), lambda r: r.specialization):
            once = sort_records(RECORDS, key, order)
            assert sort_records(once, key, order) == once


def test_sorting_does_not_mutate_source():
    source = list(RECORDS)
    sort_records(source, lambda r: r.name, "desc")

    assert source == RECORDS


def test_paginate_reports_total_before_slicing():
    page = paginate(RECORDS, skip=1, limit=2)

    assert page["total"] == 5
    assert names(page["data"]) == ["Ben Okafor", "Chen Wei"]
