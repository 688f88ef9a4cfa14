from starlette.testclient import TestClient

from adminfields.core.registry import FieldRegistry
from adminfields.fields import Textarea
from adminfields.runtime.preview import SAMPLES, create_app, sample_fields


def test_every_builtin_type_has_a_sample():
    assert sorted(SAMPLES) == sorted(FieldRegistry().types())


def test_index_lists_every_type():
    client = TestClient(create_app())
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'id="sample-price"' in response.text
    assert 'id="sample-date_range"' in response.text
    # Field markup is inserted verbatim, not escaped
    assert '<div class="price-field">' in response.text


def test_field_page_renders_markup_and_escaped_source():
    client = TestClient(create_app())
    response = client.get("/fields/select")
    assert response.status_code == 200
    assert '<select id="color" name="color">' in response.text
    assert "&lt;select id=&#34;color&#34;" in response.text


def test_field_page_query_overrides():
    client = TestClient(create_app())
    response = client.get("/fields/text", params={"value": "<b>", "label": "Heading", "name": "headline"})
    assert response.status_code == 200
    assert 'value="&lt;b&gt;"' in response.text
    assert '<label for="headline">Heading</label>' in response.text


def test_unknown_type_is_404():
    client = TestClient(create_app())
    response = client.get("/fields/wysiwyg")
    assert response.status_code == 404
    assert "wysiwyg" in response.text
    assert '<a href="/fields/text">text</a>' in response.text


def test_custom_registry_types_fall_back_to_generic_sample():
    registry = FieldRegistry({})
    registry.register("note", Textarea)
    samples = sample_fields(registry)
    assert [sample["type"] for sample in samples] == ["note"]

    client = TestClient(create_app(registry))
    response = client.get("/fields/note")
    assert response.status_code == 200
    assert '<label for="note">note</label>' in response.text
    assert client.get("/fields/text").status_code == 404
