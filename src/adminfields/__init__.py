try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("adminfields")
    except PackageNotFoundError:
        __version__ = "unknown"

from typing import Any, List, Mapping, Optional

from adminfields.core.element import Element, render
from adminfields.core.field import Field, FieldConfigError, sanitize_id
from adminfields.core.options import FieldOptions
from adminfields.core.registry import (
    FieldConstructor,
    FieldRegistry,
    Renderable,
    default_registry,
)


def render_field(
    type_name: str,
    name: str,
    value: Any = None,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render a field by type name; unknown types render as ``""``."""
    return default_registry.render(type_name, name, value, options)


def create_field(
    type_name: str,
    name: str,
    value: Any = None,
    options: Optional[Mapping[str, Any]] = None,
) -> Optional[Renderable]:
    return default_registry.create(type_name, name, value, options)


def register_field_type(type_name: str, constructor: FieldConstructor) -> None:
    default_registry.register(type_name, constructor)


def has_field_type(type_name: str) -> bool:
    return default_registry.has(type_name)


def list_field_types() -> List[str]:
    return default_registry.types()


__all__ = [
    "Element",
    "Field",
    "FieldConfigError",
    "FieldOptions",
    "FieldRegistry",
    "create_field",
    "default_registry",
    "has_field_type",
    "list_field_types",
    "register_field_type",
    "render",
    "render_field",
    "sanitize_id",
]
