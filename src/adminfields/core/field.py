"""Base class for form fields.

A field is built once from ``(name, value, options)`` and renders on request.
Subclasses declare ``DEFAULTS`` for their own option keys and implement
:meth:`Field.render_input`; the base class handles the wrapper, label and
description markup shared by every variant.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional

from adminfields.core.element import Element
from adminfields.core.options import GLOBAL_DEFAULTS, FieldOptions
from adminfields.runtime.escape import escape_html

_INVALID_ID_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
_UNDERSCORE_RUNS = re.compile(r"_+")


class FieldConfigError(ValueError):
    """Raised at construction when a field is given an impossible configuration."""

    pass


def sanitize_id(value: str) -> str:
    """Derive an HTML id from a field name.

    ``"discount[amount]"`` becomes ``"discount_amount"``.
    """
    sanitized = _INVALID_ID_CHARS.sub("_", str(value))
    sanitized = _UNDERSCORE_RUNS.sub("_", sanitized)
    return sanitized.strip("_")


class Field(ABC):
    """Labeled, wrapped form control."""

    DEFAULTS: ClassVar[Mapping[str, Any]] = {}

    def __init__(
        self, name: str, value: Any = None, options: Optional[Mapping[str, Any]] = None
    ):
        self._name = name
        self._value = value
        options = dict(options or {})

        if options.get("id") is None:
            options["id"] = sanitize_id(name)

        self._options = FieldOptions(GLOBAL_DEFAULTS, self.type_defaults(), options)
        self.validate()

    @classmethod
    def type_defaults(cls) -> Dict[str, Any]:
        """Collect ``DEFAULTS`` along the MRO, subclasses winning."""
        defaults: Dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            defaults.update(klass.__dict__.get("DEFAULTS", {}))
        return defaults

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def options(self) -> FieldOptions:
        return self._options

    @property
    def id(self) -> str:
        return self._options["id"]

    @property
    def field_type(self) -> str:
        """Identifier used in the wrapper class (``field-<type>``)."""
        return type(self).__name__.lower()

    def validate(self) -> None:
        """Hook for construction-time checks; raise :class:`FieldConfigError`."""

    def _require_choice(self, key: str, allowed: Iterable[str]) -> None:
        allowed = tuple(allowed)
        if self._options[key] not in allowed:
            raise FieldConfigError(
                f"{type(self).__name__} option '{key}' must be one of "
                f"{', '.join(allowed)}; got {self._options[key]!r}"
            )

    def render(self) -> str:
        if not self._options["wrapper"]:
            return self.render_input()

        parts = [f'<div class="{escape_html(self.wrapper_class())}">']

        if self._options["label"]:
            parts.append(self.render_label())

        parts.append(self.render_input())

        if self._options["description"]:
            parts.append(self.render_description())

        parts.append("</div>")
        return "".join(parts)

    @abstractmethod
    def render_input(self) -> str:
        """Render just the input element(s)."""

    def input(self) -> str:
        return self.render_input()

    def render_label(self) -> str:
        required = ' <span class="required">*</span>' if self._options["required"] else ""
        return (
            f'<label for="{escape_html(self.id)}">'
            f"{escape_html(self._options['label'])}{required}</label>"
        )

    def render_description(self) -> str:
        return f'<p class="description">{escape_html(self._options["description"])}</p>'

    def wrapper_class(self) -> str:
        classes = ["form-field", f"field-{self.field_type}"]
        if self._options["required"]:
            classes.append("field-required")
        return " ".join(classes)

    def build_attributes(self, extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Common ``id``/``name`` attributes plus whichever global options are set.

        ``extra`` is applied last and wins on key collisions.
        """
        opts = self._options
        attrs: Dict[str, Any] = {"id": opts["id"], "name": self._name}

        for flag in ("required", "disabled", "readonly"):
            if opts[flag]:
                attrs[flag] = True

        for key in ("placeholder", "class", "data", "attrs"):
            if opts[key]:
                attrs[key] = opts[key]

        if extra:
            attrs.update(extra)
        return attrs

    def element(self, tag: str, attributes: Mapping[str, Any], content: Any = None) -> str:
        return Element(tag, attributes, content).render()

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r})"
