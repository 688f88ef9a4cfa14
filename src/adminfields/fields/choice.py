"""Fields that pick one or more entries from an ``options`` mapping.

Entries are either plain labels or ``{"label": ..., "disabled": ...}``
records. Keys and current values are compared in their string form.
"""

from typing import Any, Dict, List, Mapping

from markupsafe import Markup

from adminfields.core.choices import (
    Choice,
    as_key,
    as_option_map,
    is_optgroup,
    iter_choices,
    make_choice,
    normalize_selection,
    optgroup_entries,
)
from adminfields.core.field import Field, sanitize_id
from adminfields.runtime.escape import escape_html

LAYOUTS = ("vertical", "horizontal")


class ChoiceField(Field):
    """Shared option and selection lookup."""

    DEFAULTS = {"options": {}}

    @property
    def option_map(self) -> Mapping[Any, Any]:
        return as_option_map(self.options["options"])

    @property
    def selected(self) -> List[str]:
        return normalize_selection(self.value)

    def choice_id(self, choice: Choice) -> str:
        return f"{self.id}_{sanitize_id(choice.key)}"


class Select(ChoiceField):
    DEFAULTS = {
        "multiple": False,
        "size": None,
        "placeholder": None,
    }

    def render_input(self) -> str:
        multiple = self.options["multiple"]
        attrs = self.build_attributes({"name": f"{self.name}[]" if multiple else self.name})
        # The placeholder becomes an empty option instead
        attrs.pop("placeholder", None)

        if multiple:
            attrs["multiple"] = True
        if self.options["size"] is not None:
            attrs["size"] = self.options["size"]

        return self.element("select", attrs, Markup(self.render_options()))

    def render_options(self) -> str:
        selected = self.selected
        parts = []

        if self.options["placeholder"] is not None:
            parts.append(
                self.element(
                    "option",
                    {
                        "value": "",
                        "disabled": not self.options["multiple"],
                        "selected": not selected,
                    },
                    self.options["placeholder"],
                )
            )

        for key, entry in self.option_map.items():
            if is_optgroup(entry):
                parts.append(self.render_optgroup(key, entry, selected))
            else:
                parts.append(self.render_option(make_choice(key, entry), selected))

        return "".join(parts)

    def render_optgroup(self, label: Any, entry: Mapping[Any, Any], selected: List[str]) -> str:
        attrs: Dict[str, Any] = {"label": as_key(label)}
        if "options" in entry and entry.get("disabled"):
            attrs["disabled"] = True

        options_html = "".join(
            self.render_option(choice, selected)
            for choice in iter_choices(optgroup_entries(entry))
        )
        return self.element("optgroup", attrs, Markup(options_html))

    def render_option(self, choice: Choice, selected: List[str]) -> str:
        attrs: Dict[str, Any] = {"value": choice.key, "selected": choice.key in selected}
        if choice.disabled:
            attrs["disabled"] = True
        return self.element("option", attrs, choice.label)


class Radio(ChoiceField):
    DEFAULTS = {"layout": "vertical"}

    def validate(self) -> None:
        super().validate()
        self._require_choice("layout", LAYOUTS)

    def render_input(self) -> str:
        current = as_key("" if self.value is None else self.value)
        parts = [f'<div class="radio-group radio-group--{escape_html(self.options["layout"])}">']

        for choice in iter_choices(self.option_map):
            radio_id = self.choice_id(choice)
            radio = self.element(
                "input",
                {
                    "type": "radio",
                    "id": radio_id,
                    "name": self.name,
                    "value": choice.key,
                    "checked": choice.key == current,
                    "disabled": choice.disabled or self.options["disabled"],
                },
            )
            parts.append(
                f'<label class="radio-item" for="{escape_html(radio_id)}">{radio} '
                f'<span class="radio-label">{escape_html(choice.label)}</span></label>'
            )

        parts.append("</div>")
        return "".join(parts)


class CheckboxGroup(ChoiceField):
    DEFAULTS = {"layout": "vertical"}

    def validate(self) -> None:
        super().validate()
        self._require_choice("layout", LAYOUTS)

    def render_input(self) -> str:
        selected = self.selected
        parts = [
            f'<div class="checkbox-group checkbox-group--{escape_html(self.options["layout"])}">'
        ]

        for choice in iter_choices(self.option_map):
            checkbox_id = self.choice_id(choice)
            checkbox = self.element(
                "input",
                {
                    "type": "checkbox",
                    "id": checkbox_id,
                    "name": f"{self.name}[]",
                    "value": choice.key,
                    "checked": choice.key in selected,
                    "disabled": choice.disabled or self.options["disabled"],
                },
            )
            parts.append(
                f'<label class="checkbox-item" for="{escape_html(checkbox_id)}">{checkbox} '
                f'<span class="checkbox-label">{escape_html(choice.label)}</span></label>'
            )

        parts.append("</div>")
        return "".join(parts)


class ButtonGroup(ChoiceField):
    """Segmented control built from radio inputs, or checkboxes when ``multiple``."""

    DEFAULTS = {"multiple": False}

    def render_input(self) -> str:
        multiple = self.options["multiple"]
        selected = self.selected
        if not multiple:
            # A radio set can only carry one checked input
            selected = selected[:1]

        input_type = "checkbox" if multiple else "radio"
        name = f"{self.name}[]" if multiple else self.name
        group_class = "button-group button-group--multiple" if multiple else "button-group"

        parts = [f'<div class="{group_class}">']
        for choice in iter_choices(self.option_map):
            button_id = self.choice_id(choice)
            is_selected = choice.key in selected
            item_class = "button-group__item is-selected" if is_selected else "button-group__item"

            button = self.element(
                "input",
                {
                    "type": input_type,
                    "id": button_id,
                    "name": name,
                    "value": choice.key,
                    "checked": is_selected,
                    "disabled": choice.disabled or self.options["disabled"],
                    "class": "button-group__input",
                },
            )
            parts.append(
                f'<label class="{item_class}" for="{escape_html(button_id)}">{button}'
                f'<span class="button-group__label">{escape_html(choice.label)}</span></label>'
            )

        parts.append("</div>")
        return "".join(parts)
