"""Tests for apidocgen.serializer."""

from __future__ import annotations

import json

import yaml

from apidocgen.models import OpenApiFormat, OpenApiSpecVersion
from apidocgen.serializer import serialize_document
from tests._fixtures.engines import make_document


def test_serialize_openapi3_json() -> None:
    text = serialize_document(
        make_document(), OpenApiSpecVersion.OPENAPI_3_0, OpenApiFormat.JSON
    )

    data = json.loads(text)
    assert list(data) == ["openapi", "info", "servers", "paths", "components"]
    assert data["openapi"] == "3.0.1"
    assert data["info"] == {"title": "Sample API", "version": "1.0.0", "description": "original"}
    assert data["components"]["schemas"]["Widget"] == {"type": "object"}
    assert text.endswith("\n")


def test_serialize_swagger_yaml_maps_servers_and_schemas() -> None:
    text = serialize_document(
        make_document(), OpenApiSpecVersion.OPENAPI_2_0, OpenApiFormat.YAML
    )

    data = yaml.safe_load(text)
    assert data["swagger"] == "2.0"
    assert data["host"] == "api.example.com"
    assert data["basePath"] == "/v1"
    assert data["schemes"] == ["https"]
    assert data["definitions"] == {"Widget": {"type": "object"}}
    assert "components" not in data
    assert "openapi" not in data


def test_serialize_omits_empty_description_and_prefixes_extensions() -> None:
    document = make_document(description=None)
    document.extensions = {"x-audience": "internal", "generator": "apidocgen"}

    data = json.loads(
        serialize_document(document, OpenApiSpecVersion.OPENAPI_3_0, OpenApiFormat.JSON)
    )

    assert "description" not in data["info"]
    assert data["x-audience"] == "internal"
    assert data["x-generator"] == "apidocgen"


def test_serialize_is_deterministic() -> None:
    first = serialize_document(make_document(), OpenApiSpecVersion.OPENAPI_3_0, OpenApiFormat.YAML)
    second = serialize_document(make_document(), OpenApiSpecVersion.OPENAPI_3_0, OpenApiFormat.YAML)

    assert first == second
    assert first.startswith("openapi: 3.0.1\n")
