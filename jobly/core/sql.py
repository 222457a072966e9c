"""
SQL helpers shared by the repositories.
"""
from typing import Any, List, Mapping, NamedTuple

from jobly.core.exceptions import ErrorKind, QueryBuildError


class UpdateFragment(NamedTuple):
    """SET clause for a parameterized UPDATE plus the values to bind, in order."""

    set_cols: str
    values: List[Any]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> UpdateFragment:
    """
    Build the SET clause for a partial update.

    Args:
        data_to_update: Field names (as the API spells them) to new values.
        js_to_sql: Field name -> column name, for fields whose column is
            spelled differently. Missing or empty entries use the field name.

    Returns:
        UpdateFragment whose placeholders run $1..$n in key order.
        Callers append their own WHERE parameters starting at $n+1.

    Raises:
        QueryBuildError: (BAD_REQUEST) if there is nothing to update.

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        UpdateFragment(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    keys = list(data_to_update)
    if not keys:
        raise QueryBuildError(ErrorKind.BAD_REQUEST, "No data")

    cols = [
        f'"{js_to_sql.get(field) or field}"=${idx}'
        for idx, field in enumerate(keys, start=1)
    ]

    return UpdateFragment(
        set_cols=", ".join(cols),
        values=[data_to_update[field] for field in keys],
    )
