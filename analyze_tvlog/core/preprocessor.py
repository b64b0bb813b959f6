# analyze_tvlog/core/preprocessor.py
import re
from typing import List

# Stand-in for spaces that belong to a single field, not whitespace to str.split()
PLACEHOLDER = '\x00'

_DATE_TIME_PAIR = re.compile(r'(\d{1,2}-\d{1,2}-\d{4}) +(\d{1,2}:\d{2}:\d{2})')


class LinePreprocessor:
    """Split connection log lines without breaking compound fields"""

    @staticmethod
    def protect(line: str) -> str:
        """
        Replace the spaces that live inside a single field with PLACEHOLDER.

        Tab-delimited lines keep every tab field whole, including empty
        ones. Date/time pairs such as '25-12-2020 14:30:00' are always
        joined.

        Args:
            line: Raw log line

        Returns:
            Line that can be split on whitespace
        """
        if '\t' in line:
            fields = line.rstrip().split('\t')
            line = '\t'.join(
                field.strip().replace(' ', PLACEHOLDER) or PLACEHOLDER
                for field in fields
            )
        return _DATE_TIME_PAIR.sub(r'\1' + PLACEHOLDER + r'\2', line)

    @staticmethod
    def restore(token: str) -> str:
        return token.replace(PLACEHOLDER, ' ').strip()

    @classmethod
    def split(cls, line: str) -> List[str]:
        """Split a line on runs of whitespace, compound fields intact"""
        return [cls.restore(token) for token in cls.protect(line).split()]
