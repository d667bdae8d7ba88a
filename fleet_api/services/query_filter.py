# fleet_api/services/query_filter.py
"""
Query-string filters → parameterized SQL predicate.
Shared by every list endpoint.

The base query must end in a tautological anchor (WHERE 1 = 1) so each
filter can be chained with AND regardless of how many there are.
A value containing commas becomes an IN list: ?name=Fiat,Ford matches either.
Values are always bound as parameters; keys are checked against the
caller's allowlist (or, without one, must be a plain SQL identifier)
before they reach the SQL text.
"""

import re
from typing import Mapping, Optional, Tuple

from fleet_api.errors import ValidationError

PLACEHOLDER = "?"
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


def _resolve_column(key: str, allowed: Optional[Mapping[str, str]]) -> str:
    if allowed is None:
        if not _IDENTIFIER.match(key):
            raise ValidationError(f"invalid filter: {key}")
        return key
    if key not in allowed:
        raise ValidationError(f"unknown filter: {key}")
    return allowed[key]


def build_filter_query(
    base_query: str,
    filters: Mapping[str, str],
    allowed: Optional[Mapping[str, str]] = None,
) -> Tuple[str, list]:
    """
    Append one AND condition per filter, in the mapping's order.

    Returns the full query and the parameter list, whose order matches the
    emitted placeholders one to one.
    """
    statement = ""
    params = []

    for key, value in filters.items():
        column = _resolve_column(key, allowed)
        if "," in value:
            values = value.split(",")
            placeholders = ",".join(PLACEHOLDER for _ in values)
            statement += f" AND {column} IN ({placeholders})"
            params.extend(values)
        else:
            statement += f" AND {column} = {PLACEHOLDER}"
            params.append(value)

    return f"{base_query}{statement}", params
