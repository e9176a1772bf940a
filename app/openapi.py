from typing import Any, Iterable, List, Type

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

REF_TEMPLATE = "#/components/schemas/{model}"


def _collapse_optional(prop: dict) -> dict:
    """Reduces pydantic's ``anyOf [X, null]`` to X, keeping outer keywords such as ``format``."""
    prop = {k: v for k, v in prop.items() if k not in ("title", "default")}
    variants = prop.pop("anyOf", None)
    if variants is None:
        return prop
    non_null = [v for v in variants if v.get("type") != "null"]
    if len(non_null) == 1:
        return {**non_null[0], **prop}
    return {"anyOf": non_null, **prop}


def query_parameters(model: Type[BaseModel], exclude: Iterable[str] = ()) -> List[dict]:
    """OpenAPI query parameter objects for each field of ``model``, by wire name."""
    schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    required = set(schema.get("required", []))
    excluded = set(exclude)
    return [
        {
            "name": name,
            "in": "query",
            "required": name in required,
            "schema": _collapse_optional(prop),
        }
        for name, prop in schema["properties"].items()
        if name not in excluded
    ]


def install_openapi(app: FastAPI, models: Iterable[Type[BaseModel]]) -> None:
    """
    Adds ``models`` and the enums they use (TimeBucketSize, AssetOrder, ...)
    to the generated components so the query parameter refs resolve.
    """
    models = list(models)

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        components = schema.setdefault("components", {}).setdefault("schemas", {})
        for model in models:
            model_schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
            for name, definition in model_schema.pop("$defs", {}).items():
                components.setdefault(name, definition)
            components.setdefault(model.__name__, model_schema)
        app.openapi_schema = schema
        return schema

    app.openapi = openapi
