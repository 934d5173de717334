"""Serialization of OpenAPI documents to JSON or YAML text."""

from __future__ import annotations

import json
from typing import Any, Dict
from urllib.parse import urlparse

import yaml

from .models import OpenApiDocument, OpenApiFormat, OpenApiInfo, OpenApiSpecVersion

OPENAPI_3_VERSION = "3.0.1"
SWAGGER_VERSION = "2.0"


def serialize_document(
    document: OpenApiDocument,
    spec_version: OpenApiSpecVersion,
    output_format: OpenApiFormat,
) -> str:
    """Render ``document`` in the requested spec version and format."""
    if spec_version is OpenApiSpecVersion.OPENAPI_2_0:
        payload = to_swagger_dict(document)
    else:
        payload = to_openapi3_dict(document)

    if output_format is OpenApiFormat.YAML:
        return yaml.safe_dump(
            payload,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def to_openapi3_dict(document: OpenApiDocument) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "openapi": OPENAPI_3_VERSION,
        "info": _info_dict(document.info),
    }
    if document.servers:
        payload["servers"] = list(document.servers)
    payload["paths"] = dict(document.paths)
    if document.components:
        payload["components"] = dict(document.components)
    if document.tags:
        payload["tags"] = list(document.tags)
    payload.update(_extensions(document))
    return payload


def to_swagger_dict(document: OpenApiDocument) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "swagger": SWAGGER_VERSION,
        "info": _info_dict(document.info),
    }
    if document.servers:
        # Swagger 2.0 only describes a single host.
        parsed = urlparse(str(document.servers[0].get("url", "")))
        if parsed.netloc:
            payload["host"] = parsed.netloc
        if parsed.path and parsed.path != "/":
            payload["basePath"] = parsed.path
        if parsed.scheme:
            payload["schemes"] = [parsed.scheme]
    payload["paths"] = dict(document.paths)
    schemas = document.components.get("schemas")
    if schemas:
        payload["definitions"] = dict(schemas)
    security_schemes = document.components.get("securitySchemes")
    if security_schemes:
        payload["securityDefinitions"] = dict(security_schemes)
    if document.tags:
        payload["tags"] = list(document.tags)
    payload.update(_extensions(document))
    return payload


def _info_dict(info: OpenApiInfo) -> Dict[str, Any]:
    data: Dict[str, Any] = {"title": info.title, "version": info.version}
    if info.description:
        data["description"] = info.description
    return data


def _extensions(document: OpenApiDocument) -> Dict[str, Any]:
    return {
        (key if key.startswith("x-") else f"x-{key}"): value
        for key, value in document.extensions.items()
    }


__all__ = ["serialize_document", "to_openapi3_dict", "to_swagger_dict"]
