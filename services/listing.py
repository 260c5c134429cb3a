"""In-memory search and ordering shared by every listing endpoint.

Listings load a whole collection, narrow it with `filter_records` and order
it with `sort_records`. Neither helper mutates its input.
"""

from typing import Any, Callable, Iterable, Optional, Sequence, Union

Field = Union[str, Callable[[Any], Any]]


def _field_value(record: Any, field: Field) -> str:
    value = field(record) if callable(field) else getattr(record, field, None)
    return "" if value is None else str(value)


def matches_search(record: Any, search: Optional[str], fields: Sequence[Field]) -> bool:
    """Case-insensitive substring match against any of `fields`."""
    if not search:
        return True
    needle = search.lower()
    return any(needle in _field_value(record, field).lower() for field in fields)


def filter_records(
    records: Iterable[Any],
    search: Optional[str] = None,
    fields: Sequence[Field] = (),
    predicate: Optional[Callable[[Any], bool]] = None,
) -> list:
    """Keep records matching the search text AND the optional category predicate."""
    return [
        record for record in records
        if matches_search(record, search, fields)
        and (predicate is None or predicate(record))
    ]


def sort_records(
    records: Iterable[Any],
    key: Callable[[Any], Any],
    sort_order: str = "asc",
) -> list:
    """Stable sort by `key`; "desc" reverses, anything else is ascending.

    Records whose key is None go last, in their original relative order.
    """
    keyed = []
    missing = []
    for record in records:
        value = key(record)
        if value is None:
            missing.append(record)
        else:
            keyed.append((value, record))

    # sorted() stays stable with reverse=True, so ties keep source order.
    keyed = sorted(keyed, key=lambda pair: pair[0], reverse=sort_order == "desc")
    return [record for _, record in keyed] + missing


def paginate(records: list, skip: int = 0, limit: int = 100) -> dict:
    return {"data": records[skip:skip + limit], "total": len(records)}
