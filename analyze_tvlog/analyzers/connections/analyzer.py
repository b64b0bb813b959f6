# analyze_tvlog/analyzers/connections/analyzer.py
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from analyze_tvlog.core import Analyzer
from .models import ConnectionRecord
from .query import filter_by_date, rank_by_duration, unique_by


@dataclass
class ConnectionQuery:
    """Options recognised by a connection log query"""
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    shortest: bool = False
    longest: bool = False
    unique: Optional[str] = None
    lexicographic: bool = False

    def __post_init__(self):
        if self.shortest and self.longest:
            raise ValueError("Choose either shortest or longest, not both")
        if self.unique and (self.shortest or self.longest):
            raise ValueError("Duration ranking and unique projection are exclusive")


class ConnectionAnalyzer(Analyzer):
    def analyze(
        self, records: Sequence[ConnectionRecord], query: ConnectionQuery
    ) -> List[ConnectionRecord]:
        """Apply the date range, then ranking or unique projection"""
        result = filter_by_date(records, after=query.after, before=query.before)

        if query.shortest or query.longest:
            result = rank_by_duration(
                result, longest=query.longest, lexicographic=query.lexicographic
            )
        elif query.unique:
            result = unique_by(result, query.unique)

        return result
