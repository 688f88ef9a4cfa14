"""Low-level HTML element generation.

Every field variant funnels its markup through :class:`Element`, which owns
attribute normalization (``data``/``attrs`` expansion), boolean attribute
handling, void tags and escaping.
"""

from typing import Any, Dict, Mapping, Optional

from adminfields.runtime.escape import escape_html, to_html

# HTML void elements that don't have closing tags
VOID_ELEMENTS = frozenset(
    {
        "input",
        "br",
        "hr",
        "img",
        "meta",
        "link",
        "area",
        "base",
        "col",
        "embed",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Rendered as a bare token when truthy, omitted otherwise
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "checked",
        "disabled",
        "readonly",
        "required",
        "multiple",
        "autofocus",
        "autoplay",
        "controls",
        "loop",
        "muted",
        "selected",
        "hidden",
        "open",
        "novalidate",
    }
)


def is_boolean_on(name: str, value: Any) -> bool:
    """Return True if ``value`` switches boolean attribute ``name`` on.

    Only ``True``, ``"true"``, the attribute's own name, ``1`` and ``"1"``
    count. ``bool`` is checked first so that ``False == 0`` never leaks in.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value in ("true", "1", name)
    return False


def normalize_attributes(attributes: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Flatten the ``data`` and ``attrs`` special keys.

    ``data`` entries become ``data-<key>`` attributes, ``attrs`` entries are
    merged verbatim. ``None`` values are dropped.
    """
    normalized: Dict[str, Any] = {}
    if not attributes:
        return normalized

    for key, value in attributes.items():
        if key == "data" and isinstance(value, Mapping):
            for data_key, data_value in value.items():
                normalized[f"data-{data_key}"] = data_value
            continue

        if key == "attrs" and isinstance(value, Mapping):
            for attr_key, attr_value in value.items():
                normalized[attr_key] = attr_value
            continue

        if value is None:
            continue

        normalized[key] = value

    return normalized


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Serialize already-normalized attributes, leading space included."""
    parts = []
    for name, value in attributes.items():
        if value is None or value == "":
            continue

        if name in BOOLEAN_ATTRIBUTES:
            if is_boolean_on(name, value):
                parts.append(f" {escape_html(name)}")
            continue

        if value is False:
            continue
        if value is True:
            value = "1"

        parts.append(f' {escape_html(name)}="{escape_html(value)}"')

    return "".join(parts)


class Element:
    """A single HTML element with escaped attributes and content."""

    def __init__(
        self,
        tag: str,
        attributes: Optional[Mapping[str, Any]] = None,
        content: Any = None,
    ):
        self.tag = tag.lower()
        self.attributes = normalize_attributes(attributes)
        self._content = content

    @classmethod
    def create(
        cls,
        tag: str,
        attributes: Optional[Mapping[str, Any]] = None,
        content: Any = None,
    ) -> "Element":
        return cls(tag, attributes, content)

    def set(self, name: str, value: Any) -> "Element":
        self.attributes[name] = value
        return self

    def add_class(self, class_names: str) -> "Element":
        """Merge class tokens into the ``class`` attribute, keeping order."""
        existing = str(self.attributes.get("class") or "").split(" ")
        merged = []
        for token in existing + class_names.split(" "):
            if token and token not in merged:
                merged.append(token)
        self.attributes["class"] = " ".join(merged)
        return self

    def data(self, values: Mapping[str, Any]) -> "Element":
        for key, value in values.items():
            self.attributes[f"data-{key}"] = value
        return self

    def content(self, content: Any) -> "Element":
        self._content = content
        return self

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def render(self) -> str:
        html = f"<{self.tag}{render_attributes(self.attributes)}"
        if self.is_void:
            return html + " />"
        return f"{html}>{to_html(self._content)}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, {self.attributes!r})"


def render(
    tag: str,
    attributes: Optional[Mapping[str, Any]] = None,
    content: Any = None,
) -> str:
    """Render a tag with escaped attributes and content.

    ``content`` is escaped unless it exposes ``__html__`` (wrap nested markup
    in ``markupsafe.Markup``). Void tags ignore content.
    """
    return Element(tag, attributes, content).render()
