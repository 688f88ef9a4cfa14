"""Widgets whose value is a mapping of several sub-values.

Each sub-input is named ``<name>[<key>]`` and identified ``<id>_<key>``. A
value that isn't a mapping renders as empty.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from markupsafe import Markup

from adminfields.core.choices import as_key, as_option_map, ensure_mapping
from adminfields.core.field import Field
from adminfields.runtime.escape import escape_html

CURRENCY_POSITIONS = ("before", "after")


class CompoundField(Field):
    def part_id(self, key: str) -> str:
        return f"{self.id}_{key}"

    def part_name(self, key: str) -> str:
        return f"{self.name}[{key}]"

    def number_input(self, key: str, value: Any, css_class: str, **extra: Any) -> str:
        """``<input type="number">`` for one sub-value.

        ``min``/``max``/``step`` come from options and are left out when
        ``None``.
        """
        attrs: Dict[str, Any] = {
            "type": "number",
            "id": self.part_id(key),
            "name": self.part_name(key),
            "value": value,
            "class": css_class,
        }
        for limit in ("min", "max", "step"):
            if self.options[limit] is not None:
                attrs[limit] = self.options[limit]
        if self.options["disabled"]:
            attrs["disabled"] = True
        attrs.update(extra)
        return self.element("input", attrs)

    def select(
        self,
        key: str,
        choices: Mapping[Any, Any],
        current: Any,
        css_class: str = "",
        label_for: Optional[Callable[[Any, Any], str]] = None,
    ) -> str:
        current = as_key("" if current is None else current)
        options_html = "".join(
            self.element(
                "option",
                {"value": as_key(choice_key), "selected": as_key(choice_key) == current},
                label_for(choice_key, label) if label_for else label,
            )
            for choice_key, label in choices.items()
        )
        attrs: Dict[str, Any] = {
            "id": self.part_id(key),
            "name": self.part_name(key),
            "class": css_class,
            "disabled": bool(self.options["disabled"]),
        }
        return self.element("select", attrs, Markup(options_html))


class Dimensions(CompoundField):
    DEFAULTS = {
        "width_label": "Width",
        "height_label": "Height",
        "separator": "×",
        "unit": "",
        "min": 0,
        "max": None,
        "step": 1,
    }

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        parts = [
            '<div class="dimensions-field">',
            self._render_side("width", value.get("width", "")),
            f'<span class="dimensions__separator">{escape_html(self.options["separator"])}</span>',
            self._render_side("height", value.get("height", "")),
        ]
        if self.options["unit"]:
            parts.append(f'<span class="dimensions__unit">{escape_html(self.options["unit"])}</span>')
        parts.append("</div>")
        return "".join(parts)

    def _render_side(self, key: str, value: Any) -> str:
        return (
            '<div class="dimensions__input-group">'
            f'<label class="dimensions__label" for="{escape_html(self.part_id(key))}">'
            f'{escape_html(self.options[f"{key}_label"])}</label>'
            f"{self.number_input(key, value, 'small-text')}"
            "</div>"
        )


class AmountType(CompoundField):
    """Amount plus a type selector, e.g. a discount as percent or flat."""

    DEFAULTS = {
        "type_options": {},
        "type_default": None,
        "min": 0,
        "max": None,
        "step": "any",
    }

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        type_value = value.get("type")
        if type_value is None:
            type_value = self.options["type_default"]

        return "".join(
            [
                '<div class="amount-type-field">',
                self.number_input(
                    "amount",
                    value.get("amount", ""),
                    "small-text",
                    required=bool(self.options["required"]),
                ),
                self.select("type", as_option_map(self.options["type_options"]), type_value),
                "</div>",
            ]
        )


class NumberUnit(CompoundField):
    DEFAULTS = {
        "units": {"px": "px", "%": "%", "em": "em", "rem": "rem"},
        "default_unit": "px",
        "min": None,
        "max": None,
        "step": 1,
    }

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        unit_value = value.get("unit")
        if unit_value is None:
            unit_value = self.options["default_unit"]

        return "".join(
            [
                '<div class="number-unit-field">',
                self.number_input(
                    "value",
                    value.get("value", ""),
                    "small-text number-unit-field__value",
                    required=bool(self.options["required"]),
                    placeholder=self.options["placeholder"],
                ),
                self.select(
                    "unit", as_option_map(self.options["units"]), unit_value, "number-unit-field__unit"
                ),
                "</div>",
            ]
        )


class Price(CompoundField):
    """Amount input with a currency selector on either side."""

    DEFAULTS = {
        "currencies": {"USD": "$", "EUR": "€", "GBP": "£"},
        "default_currency": "USD",
        "min": 0,
        "max": None,
        "step": "0.01",
        "currency_position": "before",
        "show_currency": True,
    }

    def validate(self) -> None:
        self._require_choice("currency_position", CURRENCY_POSITIONS)

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        currency_value = value.get("currency")
        if currency_value is None:
            currency_value = self.options["default_currency"]

        amount = self.number_input(
            "amount",
            value.get("amount", ""),
            "small-text price-field__amount",
            placeholder="0.00",
            required=bool(self.options["required"]),
        )

        currency = ""
        if self.options["show_currency"]:
            currency = self.select(
                "currency",
                as_option_map(self.options["currencies"]),
                currency_value,
                "price-field__currency",
                label_for=self._currency_label,
            )

        if self.options["currency_position"] == "before":
            body = currency + amount
        else:
            body = amount + currency
        return f'<div class="price-field">{body}</div>'

    @staticmethod
    def _currency_label(code: Any, symbol: Any) -> str:
        return str(code) if symbol == code else f"{code} ({symbol})"


class Link(CompoundField):
    """URL with optional link text and an "open in new tab" checkbox."""

    DEFAULTS = {
        "url_label": "URL",
        "url_placeholder": "https://",
        "title_label": "Link Text",
        "target_label": "Open in new tab",
        "show_title": True,
        "show_target": True,
    }

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        disabled = bool(self.options["disabled"])

        parts = [
            '<div class="link-field">',
            self._row(
                "url",
                self.options["url_label"],
                {
                    "type": "url",
                    "value": value.get("url", ""),
                    "class": "regular-text link-field__url",
                    "placeholder": self.options["url_placeholder"],
                    "disabled": disabled,
                    "required": bool(self.options["required"]),
                },
            ),
        ]

        if self.options["show_title"]:
            parts.append(
                self._row(
                    "title",
                    self.options["title_label"],
                    {
                        "type": "text",
                        "value": value.get("title", ""),
                        "class": "regular-text link-field__title",
                        "placeholder": self.options["title_label"],
                        "disabled": disabled,
                    },
                )
            )

        if self.options["show_target"]:
            target_id = self.part_id("target")
            checkbox = self.element(
                "input",
                {
                    "type": "checkbox",
                    "id": target_id,
                    "name": self.part_name("target"),
                    "value": "_blank",
                    "checked": value.get("target") == "_blank",
                    "disabled": disabled,
                },
            )
            parts.append(
                '<div class="link-field__row link-field__row--checkbox">'
                f'<label for="{escape_html(target_id)}">{checkbox} '
                f'{escape_html(self.options["target_label"])}</label>'
                "</div>"
            )

        parts.append("</div>")
        return "".join(parts)

    def _row(self, key: str, label: Any, attrs: Dict[str, Any]) -> str:
        attrs = {"id": self.part_id(key), "name": self.part_name(key), **attrs}
        return (
            '<div class="link-field__row">'
            f'<label class="link-field__label" for="{escape_html(self.part_id(key))}">'
            f"{escape_html(label)}</label>"
            f"{self.element('input', attrs)}"
            "</div>"
        )
