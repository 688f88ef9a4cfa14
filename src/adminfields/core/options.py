from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

# Recognized by every field; variants add their own keys on top
GLOBAL_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "id": None,
        "label": None,
        "description": None,
        "class": "",
        "wrapper": True,
        "required": False,
        "disabled": False,
        "readonly": False,
        "placeholder": None,
        "data": {},
        "attrs": {},
    }
)


class FieldOptions(Mapping[str, Any]):
    """Read-only, merged option set of a field.

    Keys are also readable as attributes (``options.min``); ``class`` is
    exposed as ``options.class_`` since it is a keyword.
    """

    __slots__ = ("_data",)

    def __init__(self, *layers: Mapping[str, Any]):
        merged: Dict[str, Any] = {}
        for layer in layers:
            if layer:
                merged.update(layer)
        object.__setattr__(self, "_data", merged)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name == "_data":
            # Slot not yet set, e.g. on a copy.copy() in progress
            raise AttributeError(name)
        key = "class" if name == "class_" else name
        try:
            return self._data[key]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("FieldOptions is read-only")

    def __reduce__(self) -> Any:
        return (FieldOptions, (self._data,))

    def __repr__(self) -> str:
        return f"FieldOptions({self._data!r})"

    def replace(self, **changes: Any) -> "FieldOptions":
        """Return a copy with ``changes`` applied on top."""
        return FieldOptions(self._data, changes)
