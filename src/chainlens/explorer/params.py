# File: src/chainlens/explorer/params.py
import re
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..exceptions import ValidationError

# Leading integer, the rest is ignored: "5.0", "+5" and "5abc" all read as 5
_LEADING_INTEGER = re.compile(r'\s*([+-]?[0-9]+)')


def get_str(params: Mapping[str, str], name: str) -> Optional[str]:
    """Query parameter value; empty strings count as absent."""
    value = params.get(name)
    return value or None


def get_int(params: Mapping[str, str], name: str, default: int) -> int:
    value = get_str(params, name)
    if value is None:
        return default
    return parse_int(value, name)


def parse_int(value: str, name: str) -> int:
    match = _LEADING_INTEGER.match(value)
    if match is None:
        raise ValidationError(f"Parameter '{name}' must be an integer")
    return int(match.group(1))


def first_values(items: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """Collapse repeated query keys, keeping the first value of each."""
    params: Dict[str, str] = {}
    for key, value in items:
        params.setdefault(key, value)
    return params
