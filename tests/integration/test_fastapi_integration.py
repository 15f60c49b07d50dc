"""Integration tests for post-processing FastAPI's generated schema."""

from __future__ import annotations

from typing import Optional

import pytest
from fastapi import FastAPI
from pydantic import BaseModel

from openapi_postprocessing import PostProcessor
from openapi_postprocessing.errors import ValidationError
from openapi_postprocessing.integrations.fastapi import install_postprocessing
from openapi_postprocessing.visitors import drop_deprecated, drop_tagged

pytestmark = pytest.mark.integration


class Owner(BaseModel):
    name: str


class Pet(BaseModel):
    name: str
    owner: Owner
    previous_owner: Optional[Owner] = None


def build_app() -> FastAPI:
    app = FastAPI(title="Pets", version="1.0.0")

    @app.get("/pets", tags=["pets"])
    def list_pets() -> list[Pet]:
        return []

    @app.post("/pets", tags=["pets"])
    def create_pet(pet: Pet) -> Pet:
        return pet

    @app.delete("/pets/{pet_id}", tags=["pets"], deprecated=True)
    def delete_pet(pet_id: int) -> None:
        return None

    @app.get("/internal/health", tags=["internal"])
    def health() -> dict:
        return {"status": "ok"}

    return app


def test_operation_visitors_shape_served_schema() -> None:
    app = build_app()
    install_postprocessing(app, operation_visitors=[drop_tagged("internal"), drop_deprecated()])

    schema = app.openapi()

    assert list(schema["paths"]) == ["/pets"]
    assert set(schema["paths"]["/pets"]) == {"get", "post"}


def test_property_visitors_see_model_fields() -> None:
    app = build_app()
    seen: list[str] = []
    install_postprocessing(app, property_visitors=[lambda _schema, name: seen.append(name)])

    app.openapi()

    assert {"name", "owner", "previous_owner"} <= set(seen)


def test_schema_is_processed_once_and_cached() -> None:
    app = build_app()
    calls: list[str] = []
    install_postprocessing(app, operation_visitors=[lambda _op, _method, path: calls.append(path)])

    first = app.openapi()
    second = app.openapi()

    assert first is second
    assert app.openapi_schema is first
    assert calls.count("/pets") == 2


def test_install_discards_previously_built_schema() -> None:
    app = build_app()
    assert "/internal/health" in app.openapi()["paths"]

    install_postprocessing(app, operation_visitors=[drop_tagged("internal")])

    assert "/internal/health" not in app.openapi()["paths"]


def test_install_returns_given_processor() -> None:
    app = build_app()
    processor = PostProcessor(operation_visitors=[drop_tagged("internal")])

    assert install_postprocessing(app, processor) is processor
    assert "/internal/health" not in app.openapi()["paths"]


def test_processor_and_visitor_lists_are_exclusive() -> None:
    with pytest.raises(ValidationError, match="either a post_processor or visitor lists"):
        install_postprocessing(
            build_app(),
            PostProcessor(),
            operation_visitors=[drop_tagged("internal")],
        )


def test_failed_processing_is_retried_on_next_call() -> None:
    app = FastAPI(title="Pets", version="1.0.0")

    @app.get("/boom")
    def boom() -> dict:
        return {}

    @app.get("/internal", tags=["internal"])
    def internal() -> dict:
        return {}

    failures: list[str] = []

    def fail_once(_operation, _method, path):
        if path == "/boom" and not failures:
            failures.append(path)
            raise RuntimeError("visitor fault")
        return None

    install_postprocessing(app, operation_visitors=[drop_tagged("internal"), fail_once])

    with pytest.raises(RuntimeError, match="visitor fault"):
        app.openapi()
    assert app.openapi_schema is None

    schema = app.openapi()

    assert "/internal" not in schema["paths"]
    assert "/boom" in schema["paths"]
    assert app.openapi_schema is schema
