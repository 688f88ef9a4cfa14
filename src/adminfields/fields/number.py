"""Numeric inputs: plain number and range slider."""

from typing import Any

from adminfields.core.field import Field
from adminfields.runtime.escape import escape_html


class Number(Field):
    DEFAULTS = {"min": None, "max": None, "step": None}

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {"type": "number", "value": "" if self.value is None else self.value}
        )

        for key in ("min", "max", "step"):
            if self.options[key] is not None:
                attrs[key] = self.options[key]

        if not attrs.get("class"):
            attrs["class"] = "small-text"

        return self.element("input", attrs)


class Range(Field):
    """Slider with an optional ``<output>`` showing the value and unit.

    The wrapper carries ``data-unit`` so a client script can keep the output
    in sync while dragging.
    """

    DEFAULTS = {
        "min": 0,
        "max": 100,
        "step": 1,
        "unit": "",
        "show_output": True,
    }

    @property
    def current(self) -> Any:
        if self.value is None or self.value == "":
            return self.options["min"]
        return self.value

    def render_input(self) -> str:
        value = self.current
        attrs = self.build_attributes(
            {
                "type": "range",
                "value": value,
                "min": self.options["min"],
                "max": self.options["max"],
                "step": self.options["step"],
            }
        )

        parts = [
            f'<div class="range-field-wrapper" data-unit="{escape_html(self.options["unit"])}">',
            self.element("input", attrs),
        ]

        if self.options["show_output"]:
            parts.append(
                self.element(
                    "output",
                    {"for": self.id, "class": "range-output"},
                    f"{value}{self.options['unit']}",
                )
            )

        parts.append("</div>")
        return "".join(parts)
