from typing import Any, Dict, Mapping, Optional

from adminfields.core.field import Field, sanitize_id

BUTTON_TYPES = ("button", "submit", "reset")


class Button(Field):
    """``<button>`` rendered without wrapper or label.

    Built from the button text; the form ``name`` and ``value`` attributes
    are read from options. The id is derived from the text when unset.
    """

    DEFAULTS = {
        "type": "button",
        "wrapper": False,
        "primary": False,
        "small": False,
        "large": False,
    }

    def __init__(self, text: str, options: Optional[Mapping[str, Any]] = None):
        self._text = text
        options = dict(options or {})
        if not options.get("id"):
            options["id"] = sanitize_id(text)
        super().__init__(options.get("name") or "", options.get("value"), options)

    def validate(self) -> None:
        self._require_choice("type", BUTTON_TYPES)

    @classmethod
    def from_field_args(
        cls, name: str, value: Any = None, options: Optional[Mapping[str, Any]] = None
    ) -> "Button":
        """Registry constructor: ``name`` is the button text, ``value`` its value attribute."""
        options = dict(options or {})
        if value is not None:
            options.setdefault("value", value)
        return cls(name, options)

    @property
    def text(self) -> str:
        return self._text

    def render(self) -> str:
        return self.render_input()

    def render_input(self) -> str:
        opts = self.options
        classes = ["button"]
        if opts["primary"] or opts["type"] == "submit":
            classes.append("button-primary")
        if opts["small"]:
            classes.append("button-small")
        if opts["large"]:
            classes.append("button-large")
        if opts["class"]:
            classes.append(opts["class"])

        attrs: Dict[str, Any] = {
            "type": opts["type"],
            "id": opts["id"],
            "class": " ".join(classes),
        }
        if self.name:
            attrs["name"] = self.name
        if self.value is not None:
            attrs["value"] = self.value
        if opts["disabled"]:
            attrs["disabled"] = True
        if opts["data"]:
            attrs["data"] = opts["data"]
        if opts["attrs"]:
            attrs["attrs"] = opts["attrs"]

        return self.element("button", attrs, self._text)
