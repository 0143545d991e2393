"""
Department classifier - Derive a department label from a USN.

The department is never stored. Every view that shows one (roster listing,
roster summary, spreadsheet export) calls classify() so labels stay consistent.
"""

import re

DEFAULT_DEPARTMENT = "AI&ML"

DEPARTMENTS_BY_CODE = {
    "AD": "AI&DS",
    "AI": DEFAULT_DEPARTMENT,
    "EC": "E&C",
    "CS": "CSE",
}

_USN_DEPARTMENT_PATTERN = re.compile(r"4MW\d+(AD|AI|EC|CS)", re.IGNORECASE)


def classify(usn: str) -> str:
    """
    Map a USN to its department label.

    Total function: unrecognized or malformed input falls back to
    DEFAULT_DEPARTMENT instead of raising.

    >>> classify("4MW21AD043")
    'AI&DS'
    >>> classify("garbage")
    'AI&ML'
    """
    if not isinstance(usn, str):
        return DEFAULT_DEPARTMENT

    match = _USN_DEPARTMENT_PATTERN.search(usn)
    if match is None:
        return DEFAULT_DEPARTMENT
    return DEPARTMENTS_BY_CODE.get(match.group(1).upper(), DEFAULT_DEPARTMENT)
