"""Option entries and selection normalization for choice fields.

Option keys and current values are compared as strings, so ``1`` and ``"1"``
select the same entry.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping


@dataclass(frozen=True)
class Choice:
    key: str
    label: str
    disabled: bool = False


def as_key(value: Any) -> str:
    """String form used for every selection comparison."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def is_on(value: Any) -> bool:
    """Checked state of a single on/off control.

    ``None``, ``False``, ``0``, ``""``, ``"0"`` and empty containers are off;
    ``"0"`` is what saved form data holds for an unchecked box.
    """
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def normalize_selection(value: Any) -> List[str]:
    """Turn a field value into the list of selected keys.

    ``None`` and ``""`` select nothing; scalars select one key; lists,
    tuples and sets select each member.
    """
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return [as_key(v) for v in value]
    return [as_key(value)]


def make_choice(key: Any, entry: Any) -> Choice:
    """Build a :class:`Choice` from a scalar label or a ``{label, disabled}`` record."""
    if isinstance(entry, Mapping):
        label = entry.get("label", key)
        return Choice(as_key(key), str(label), bool(entry.get("disabled")))
    return Choice(as_key(key), str(entry))


def iter_choices(options: Mapping[Any, Any]) -> Iterator[Choice]:
    for key, entry in options.items():
        yield make_choice(key, entry)


def is_optgroup(entry: Any) -> bool:
    """An entry is an optgroup when it is a mapping without a ``label`` key,
    or a mapping with an explicit ``options`` key."""
    if not isinstance(entry, Mapping):
        return False
    return "options" in entry or "label" not in entry


def optgroup_entries(entry: Mapping[Any, Any]) -> Mapping[Any, Any]:
    if "options" in entry:
        return as_option_map(entry["options"])
    return entry


def as_option_map(value: Any) -> Mapping[Any, Any]:
    """Read an options setting as a key to entry mapping.

    Lists and tuples are keyed by position; anything else that isn't a
    mapping reads as empty.
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (list, tuple)):
        return dict(enumerate(value))
    return {}


def ensure_mapping(value: Any) -> Mapping[Any, Any]:
    """Compound field values that aren't mappings are read as empty."""
    return value if isinstance(value, Mapping) else {}
