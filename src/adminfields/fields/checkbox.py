"""Single on/off controls."""

from adminfields.core.choices import is_on
from adminfields.core.field import Field
from adminfields.runtime.escape import escape_html


class Checkbox(Field):
    """Checkbox whose label follows the input inside one ``<label>``."""

    DEFAULTS = {
        "checkbox_value": "1",
        "checkbox_label": None,
    }

    def render(self) -> str:
        if not self.options["wrapper"]:
            return self.render_input()

        parts = [f'<div class="{escape_html(self.wrapper_class())}">', self.render_input()]
        if self.options["description"]:
            parts.append(self.render_description())
        parts.append("</div>")
        return "".join(parts)

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {
                "type": "checkbox",
                "value": self.options["checkbox_value"],
                "checked": is_on(self.value),
            }
        )
        attrs.pop("placeholder", None)
        checkbox = self.element("input", attrs)

        label_text = self.options["checkbox_label"] or self.options["label"]
        if not label_text:
            return checkbox

        return f'<label for="{escape_html(self.id)}">{checkbox} {escape_html(label_text)}</label>'

    def render_label(self) -> str:
        return ""


class Toggle(Field):
    """Switch-styled checkbox with optional on/off captions."""

    DEFAULTS = {
        "on_label": "",
        "off_label": "",
    }

    def render_input(self) -> str:
        attrs = self.build_attributes(
            {
                "type": "checkbox",
                "value": "1",
                "checked": is_on(self.value),
                "class": "toggle__input",
            }
        )
        attrs.pop("placeholder", None)

        parts = [
            '<div class="toggle-field">',
            f'<label class="toggle" for="{escape_html(self.id)}">',
            self.element("input", attrs),
            '<span class="toggle__slider"></span>',
            "</label>",
        ]

        on_label = self.options["on_label"]
        off_label = self.options["off_label"]
        show_captions = bool(on_label or off_label)
        if show_captions:
            parts.append(
                '<span class="toggle__labels">'
                f'<span class="toggle__label-off">{escape_html(off_label or "")}</span>'
                f'<span class="toggle__label-on">{escape_html(on_label or "")}</span>'
                "</span>"
            )
        elif self.options["label"]:
            parts.append(f'<span class="toggle__text">{escape_html(self.options["label"])}</span>')

        parts.append("</div>")
        return "".join(parts)

    def render_label(self) -> str:
        # The main label becomes a heading only when both captions take the switch's sides
        if self.options["on_label"] and self.options["off_label"]:
            return super().render_label()
        return ""
