"""
Version Utilities

Dotted version comparison in the style of PHP's version_compare().
"""

import re
from typing import List, Optional

_SEGMENT_RE = re.compile(r"\d+|[A-Za-z]+", re.ASCII)

# Prefix matched in this order, so "pl" wins over "p" and "alpha" over "a"
_SPECIAL_FORMS = (
    ("dev", 0),
    ("alpha", 1),
    ("a", 1),
    ("beta", 2),
    ("b", 2),
    ("RC", 3),
    ("rc", 3),
    ("#", 4),
    ("pl", 5),
    ("p", 5),
)
_UNKNOWN_FORM = -6
# Stand-in for a number (or a missing segment) when compared with a word
_NUMBER = "#"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _special_rank(form: str) -> int:
    for name, rank in _SPECIAL_FORMS:
        if form.startswith(name):
            return rank
    return _UNKNOWN_FORM


def _compare_forms(a: str, b: str) -> int:
    return _sign(_special_rank(a) - _special_rank(b))


def split_version(version: Optional[str]) -> List[str]:
    """Split a version into numeric and alphabetic segments.

    Separators ("-", "_", "+", ".", anything non-alphanumeric) are dropped and
    digit/letter transitions start a new segment, so "1.0rc1" gives
    ["1", "0", "rc", "1"].
    """
    if not version:
        return []
    return _SEGMENT_RE.findall(version)


def _compare_segment(a: str, b: str) -> int:
    a_digit = a.isdigit()
    b_digit = b.isdigit()
    if a_digit and b_digit:
        return _sign(int(a) - int(b))
    if not a_digit and not b_digit:
        return _compare_forms(a, b)
    if a_digit:
        return _compare_forms(_NUMBER, b)
    return _compare_forms(a, _NUMBER)


def compare_versions(a: Optional[str], b: Optional[str]) -> int:
    """
    Compare two version strings.

    Returns -1, 0 or 1. Numeric segments compare numerically, missing numeric
    segments count as zero ("1.0" == "1.0.0") and pre-release words sort
    before the plain release ("2.0-beta" < "2.0", "1.0rc1" < "1.0").
    Empty or None versions sort before everything else.
    """
    a = (a or "").strip()
    b = (b or "").strip()
    if not a or not b:
        return _sign(bool(a) - bool(b))

    left = split_version(a)
    right = split_version(b)

    for i in range(max(len(left), len(right))):
        if i >= len(right):
            seg = left[i]
            result = _sign(int(seg)) if seg.isdigit() else _compare_forms(seg, _NUMBER)
        elif i >= len(left):
            seg = right[i]
            result = -_sign(int(seg)) if seg.isdigit() else _compare_forms(_NUMBER, seg)
        else:
            result = _compare_segment(left[i], right[i])
        if result:
            return result
    return 0


def version_lt(a: Optional[str], b: Optional[str]) -> bool:
    """True when version ``a`` is strictly older than ``b``."""
    return compare_versions(a, b) < 0
