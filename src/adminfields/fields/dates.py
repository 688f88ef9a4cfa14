"""Date and time inputs, single and paired."""

from typing import Any, Dict, Tuple

from adminfields.core.choices import ensure_mapping
from adminfields.core.field import Field
from adminfields.runtime.escape import escape_html


class TemporalField(Field):
    """Native date/time ``<input>``; browsers ignore placeholders here."""

    INPUT_TYPE = "date"
    LIMITS: Tuple[str, ...] = ("min", "max", "step")
    DEFAULTS = {"min": None, "max": None, "step": None}

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {"type": self.INPUT_TYPE, "value": "" if self.value is None else self.value}
        )
        attrs.pop("placeholder", None)

        for key in self.LIMITS:
            if self.options[key] is not None:
                attrs[key] = self.options[key]

        return self.element("input", attrs)


class Date(TemporalField):
    INPUT_TYPE = "date"
    LIMITS = ("min", "max")


class Time(TemporalField):
    # step is in seconds, e.g. 60 for minute intervals
    INPUT_TYPE = "time"


class DateTime(TemporalField):
    INPUT_TYPE = "datetime-local"


class RangePicker(Field):
    """Two bound inputs, ``name[start]`` and ``name[end]``, with a separator."""

    INPUT_TYPE = "date"
    PICKER_CLASS = "date-range"
    LIMITS: Tuple[str, ...] = ("min", "max")
    DEFAULTS = {
        "start_label": "Start",
        "end_label": "End",
        "separator": "—",
        "min": None,
        "max": None,
    }

    def render_input(self) -> str:
        value = ensure_mapping(self.value)
        return "".join(
            [
                f'<div class="range-picker {self.PICKER_CLASS}">',
                self._render_bound("start", value.get("start", "")),
                f'<span class="range-picker__separator">{escape_html(self.options["separator"])}</span>',
                self._render_bound("end", value.get("end", "")),
                "</div>",
            ]
        )

    def _render_bound(self, bound: str, value: Any) -> str:
        bound_id = f"{self.id}_{bound}"
        attrs: Dict[str, Any] = {
            "type": self.INPUT_TYPE,
            "id": bound_id,
            "name": f"{self.name}[{bound}]",
            "value": "" if value is None else value,
            "class": "range-picker__input",
        }
        for key in self.LIMITS:
            if self.options[key] is not None:
                attrs[key] = self.options[key]
        if self.options["disabled"]:
            attrs["disabled"] = True

        return (
            '<div class="range-picker__field">'
            f'<label class="range-picker__label" for="{escape_html(bound_id)}">'
            f'{escape_html(self.options[f"{bound}_label"])}</label>'
            f"{self.element('input', attrs)}"
            "</div>"
        )


class DateRange(RangePicker):
    INPUT_TYPE = "date"
    PICKER_CLASS = "date-range"


class TimeRange(RangePicker):
    INPUT_TYPE = "time"
    PICKER_CLASS = "time-range"
    LIMITS = ("min", "max", "step")
    DEFAULTS = {"step": None}
