# analyze_tvlog/analyzers/connections/query.py
from datetime import datetime
from typing import List, Optional, Sequence

from .models import UNIQUE_FIELDS, ConnectionRecord

TOP_N = 10


def filter_by_date(
    records: Sequence[ConnectionRecord],
    after: Optional[datetime] = None,
    before: Optional[datetime] = None,
) -> List[ConnectionRecord]:
    """
    Keep records whose start time lies strictly between the given bounds.

    Args:
        records: Parsed connection records
        after: Exclusive lower bound on the start time
        before: Exclusive upper bound on the start time

    Returns:
        New list of records. Without bounds every record is returned; with
        any bound, records lacking a start time are dropped.
    """
    if after is None and before is None:
        return list(records)

    return [
        record for record in records
        if record.start is not None
        and (after is None or record.start > after)
        and (before is None or record.start < before)
    ]


def rank_by_duration(
    records: Sequence[ConnectionRecord],
    longest: bool = False,
    limit: int = TOP_N,
    lexicographic: bool = False,
) -> List[ConnectionRecord]:
    """
    Return the shortest (or longest) sessions.

    Records are ordered by elapsed time and records without a duration come
    last in both directions. With lexicographic=True the records are ordered
    by their duration_text string. Sentinels then sort by their text
    ('Invalid Duration' after every time, '--' before), negative durations
    come first and spans of 100 days or more sort as text ('100d...' before
    '99d...').
    """
    if lexicographic:
        ranked = sorted(records, key=lambda r: r.duration_text, reverse=longest)
        return ranked[:limit]

    timed = [r for r in records if r.duration is not None]
    untimed = [r for r in records if r.duration is None]
    timed.sort(key=lambda r: r.duration, reverse=longest)
    return (timed + untimed)[:limit]


def unique_by(records: Sequence[ConnectionRecord], field: str) -> List[ConnectionRecord]:
    """
    One record per distinct value of field, ordered by that value.

    The sort is stable, so the representative kept for each value is the
    first record carrying it in file order. Absent values sort last and
    collapse into a single entry.

    Raises:
        ValueError: If field is not a projectable column
    """
    if field not in UNIQUE_FIELDS:
        raise ValueError(
            f"Cannot project on {field!r}, expected one of {', '.join(UNIQUE_FIELDS)}"
        )

    ordered = sorted(
        records,
        key=lambda r: (getattr(r, field) is None, getattr(r, field) or ""),
    )

    result = []
    seen = set()
    for record in ordered:
        value = getattr(record, field)
        if value in seen:
            continue
        seen.add(value)
        result.append(record)
    return result
