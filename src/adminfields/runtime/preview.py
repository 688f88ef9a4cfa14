"""Preview server rendering every registered field type.

Meant for eyeballing markup while styling an admin theme; it serves no
stylesheet or script of its own.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from adminfields.core.registry import FieldRegistry, default_registry
from adminfields.runtime.templates import render_template

logger = logging.getLogger(__name__)

# (name, value, options); buttons take their text as the name
Sample = Tuple[str, Any, Dict[str, Any]]

_COLORS = {"red": "Red", "green": "Green", "blue": "Blue"}

SAMPLES: Mapping[str, Sample] = {
    "text": ("title", "Hello", {"label": "Text", "placeholder": "Type here"}),
    "url": ("website", "https://example.com", {"label": "URL"}),
    "email": ("email", "", {"label": "Email", "required": True}),
    "tel": ("phone", "", {"label": "Phone"}),
    "password": ("password", "", {"label": "Password"}),
    "hidden": ("token", "secret", {}),
    "textarea": ("notes", "Some <b>longer</b> text", {"label": "Textarea", "rows": 3}),
    "number": ("count", 3, {"label": "Number", "min": 0, "max": 10}),
    "range": ("opacity", 40, {"label": "Range", "unit": "%"}),
    "select": (
        "color",
        "green",
        {"label": "Select", "options": _COLORS, "placeholder": "Pick a color"},
    ),
    "checkbox": ("enabled", True, {"checkbox_label": "Enabled"}),
    "checkbox_group": ("colors", ["red", "blue"], {"label": "Checkbox group", "options": _COLORS}),
    "radio": ("primary_color", "blue", {"label": "Radio", "options": _COLORS}),
    "button_group": (
        "palette",
        ["red", "green"],
        {"label": "Button group", "options": _COLORS, "multiple": True},
    ),
    "toggle": ("active", True, {"label": "Toggle", "on_label": "On", "off_label": "Off"}),
    "color": ("accent", "#3366ff", {"label": "Color"}),
    "date": ("starts_on", "2024-01-31", {"label": "Date"}),
    "time": ("opens_at", "09:30", {"label": "Time"}),
    "datetime": ("published_at", "2024-01-31T09:30", {"label": "Date & time"}),
    "date_range": (
        "period",
        {"start": "2024-01-01", "end": "2024-01-31"},
        {"label": "Date range"},
    ),
    "time_range": ("hours", {"start": "09:00", "end": "17:00"}, {"label": "Time range"}),
    "button": ("Button", None, {}),
    "submit": ("Save", None, {}),
    "reset": ("Reset", None, {}),
    "dimensions": ("size", {"width": 800, "height": 600}, {"label": "Dimensions", "unit": "px"}),
    "amount_type": (
        "discount",
        {"amount": 10, "type": "percent"},
        {"label": "Discount", "type_options": {"percent": "%", "flat": "Flat"}},
    ),
    "link": ("cta", {"url": "https://example.com", "target": "_blank"}, {"label": "Link"}),
    "price": ("price", {"amount": "19.99", "currency": "EUR"}, {"label": "Price"}),
    "number_unit": ("font_size", {"value": 12, "unit": "em"}, {"label": "Font size"}),
}


def sample_for(type_name: str) -> Sample:
    return SAMPLES.get(type_name, (type_name, None, {"label": type_name}))


def sample_fields(registry: FieldRegistry) -> List[Dict[str, Any]]:
    """One sample field per registered type, in registration order."""
    samples = []
    for type_name in registry.types():
        name, value, options = sample_for(type_name)
        samples.append({"type": type_name, "field": registry.create(type_name, name, value, options)})
    return samples


def create_app(registry: Optional[FieldRegistry] = None, debug: bool = False) -> Starlette:
    registry = registry or default_registry

    async def index(request: Request) -> HTMLResponse:
        html = render_template(
            "preview/index.html",
            {"samples": sample_fields(registry), "types": registry.types()},
        )
        return HTMLResponse(html)

    async def field_detail(request: Request) -> HTMLResponse:
        type_name = request.path_params["type_name"]
        if not registry.has(type_name):
            logger.info("Preview requested for unknown field type %r", type_name)
            html = render_template(
                "preview/not_found.html", {"type_name": type_name, "types": registry.types()}
            )
            return HTMLResponse(html, status_code=404)

        params = request.query_params
        name, value, options = sample_for(type_name)
        options = dict(options)
        if "value" in params:
            value = params["value"]
        if "label" in params:
            options["label"] = params["label"]

        field = registry.create(type_name, params.get("name", name), value, options)
        html = render_template("preview/field.html", {"type_name": type_name, "field": field})
        return HTMLResponse(html)

    routes = [
        Route("/", index),
        Route("/fields/{type_name}", field_detail),
    ]
    return Starlette(debug=debug, routes=routes)
