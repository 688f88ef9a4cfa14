"""Single-value text-like inputs."""

from typing import Any, Dict

from adminfields.core.field import Field

TEXT_INPUT_TYPES = ("text", "url", "email", "tel", "password")


class Text(Field):
    """``<input>`` for text, url, email, tel and password values."""

    DEFAULTS = {
        "type": "text",
        "maxlength": None,
        "minlength": None,
        "pattern": None,
        "size": None,
    }

    @property
    def field_type(self) -> str:
        return str(self.options["type"])

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {
                "type": self.options["type"],
                "value": "" if self.value is None else self.value,
            }
        )

        for key in ("maxlength", "minlength", "pattern", "size"):
            if self.options[key] is not None:
                attrs[key] = self.options[key]

        if not attrs.get("class"):
            attrs["class"] = "regular-text"

        return self.element("input", attrs)


class Hidden(Field):
    DEFAULTS = {"wrapper": False}

    def render(self) -> str:
        return self.render_input()

    def render_input(self) -> str:
        attrs: Dict[str, Any] = {
            "type": "hidden",
            "id": self.id,
            "name": self.name,
            "value": "" if self.value is None else self.value,
        }
        if self.options["data"]:
            attrs["data"] = self.options["data"]
        if self.options["attrs"]:
            attrs["attrs"] = self.options["attrs"]
        return self.element("input", attrs)


class Textarea(Field):
    DEFAULTS = {
        "rows": 5,
        "cols": None,
        "maxlength": None,
        "minlength": None,
    }

    def render_input(self) -> str:
        attrs = self.build_attributes({"rows": self.options["rows"]})

        for key in ("cols", "maxlength", "minlength"):
            if self.options[key] is not None:
                attrs[key] = self.options[key]

        if not attrs.get("class"):
            attrs["class"] = "large-text"

        # Plain string content is escaped by Element
        return self.element("textarea", attrs, "" if self.value is None else str(self.value))


class Color(Field):
    DEFAULTS = {"default": "#000000"}

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {"type": "color", "value": self.value or self.options["default"]}
        )
        attrs.pop("placeholder", None)

        # Copy so the caller's data mapping is never mutated
        data = dict(attrs.get("data") or {})
        data["default-color"] = self.options["default"]
        attrs["data"] = data

        return self.element("input", attrs)
