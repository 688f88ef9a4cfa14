"""Field type registry.

Maps type names to constructors ``(name, value, options) -> field``. Any
callable returning an object with ``render()`` and ``render_input()`` can be
registered, a :class:`~adminfields.core.field.Field` subclass being the
usual case.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from adminfields.fields import (
    AmountType,
    Button,
    ButtonGroup,
    Checkbox,
    CheckboxGroup,
    Color,
    Date,
    DateRange,
    DateTime,
    Dimensions,
    Hidden,
    Link,
    Number,
    NumberUnit,
    Price,
    Radio,
    Range,
    Select,
    Text,
    Textarea,
    Time,
    TimeRange,
    Toggle,
)
from adminfields.fields.button import BUTTON_TYPES
from adminfields.fields.text import TEXT_INPUT_TYPES

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    def render(self) -> str: ...

    def render_input(self) -> str: ...


FieldConstructor = Callable[[str, Any, Optional[Mapping[str, Any]]], Renderable]


def _with_type(input_type: str, build: FieldConstructor) -> FieldConstructor:
    """Constructor that forces the ``type`` option, as the type name dictates."""

    def construct(
        name: str, value: Any = None, options: Optional[Mapping[str, Any]] = None
    ) -> Renderable:
        return build(name, value, {**(options or {}), "type": input_type})

    construct.__name__ = getattr(build, "__name__", "construct")
    construct.__qualname__ = construct.__name__
    return construct


def builtin_types() -> Dict[str, FieldConstructor]:
    types: Dict[str, FieldConstructor] = {}
    for input_type in TEXT_INPUT_TYPES:
        types[input_type] = _with_type(input_type, Text)
    types.update(
        {
            "hidden": Hidden,
            "textarea": Textarea,
            "number": Number,
            "range": Range,
            "select": Select,
            "checkbox": Checkbox,
            "checkbox_group": CheckboxGroup,
            "radio": Radio,
            "button_group": ButtonGroup,
            "toggle": Toggle,
            "color": Color,
            "date": Date,
            "time": Time,
            "datetime": DateTime,
            "date_range": DateRange,
            "time_range": TimeRange,
        }
    )
    for button_type in BUTTON_TYPES:
        types[button_type] = _with_type(button_type, Button.from_field_args)
    types.update(
        {
            "dimensions": Dimensions,
            "amount_type": AmountType,
            "link": Link,
            "price": Price,
            "number_unit": NumberUnit,
        }
    )
    return types


class FieldRegistry:
    """Type name to constructor table with custom registration."""

    def __init__(self, types: Optional[Mapping[str, FieldConstructor]] = None):
        self._types: Dict[str, FieldConstructor] = dict(
            builtin_types() if types is None else types
        )

    def create(
        self,
        type_name: str,
        name: str,
        value: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Renderable]:
        """Build a field, or return ``None`` when ``type_name`` is unknown."""
        constructor = self._types.get(type_name)
        if constructor is None:
            logger.debug("Unknown field type %r", type_name)
            return None
        return constructor(name, value, options)

    def render(
        self,
        type_name: str,
        name: str,
        value: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        field = self.create(type_name, name, value, options)
        return field.render() if field is not None else ""

    def register(self, type_name: str, constructor: FieldConstructor) -> None:
        if not callable(constructor):
            raise TypeError(
                f"Field type '{type_name}' needs a callable constructor, "
                f"got {type(constructor).__name__}"
            )
        if type_name in self._types:
            logger.debug("Replacing field type %r", type_name)
        self._types[type_name] = constructor
        logger.debug("Registered field type %r -> %r", type_name, constructor)

    def unregister(self, type_name: str) -> bool:
        """Remove a type; returns False when it wasn't registered."""
        return self._types.pop(type_name, None) is not None

    def has(self, type_name: str) -> bool:
        return type_name in self._types

    def types(self) -> List[str]:
        return list(self._types)

    def constructor(self, type_name: str) -> Optional[FieldConstructor]:
        return self._types.get(type_name)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types


default_registry = FieldRegistry()
