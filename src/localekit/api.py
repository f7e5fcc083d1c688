"""HTTP API for localekit."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from localekit import __version__
from localekit.config import load_config
from localekit.errors import ResolutionError
from localekit.io import load_area_languages, to_payload
from localekit.languages import (
    AreaLanguages,
    CurrentLanguageResolver,
    LanguageRegistry,
    parse_identifier,
)
from localekit.logging import configure_logging, get_logger
from localekit.models import HealthResponse, LanguagePayload, ResolveResponse

logger = get_logger(__name__)


def create_app(area_languages: AreaLanguages | None = None) -> FastAPI:
    """Build the FastAPI application.

    Registries are loaded once; resolution runs against a per-request copy so
    the shared registries' current selection is never touched.
    """
    config = load_config()
    configure_logging(config.log_level, json_logs=config.log_json)
    registries = area_languages
    if registries is None:
        if config.languages_path.exists():
            registries = load_area_languages(config.languages_path)
        else:
            logger.warning("languages_file_missing", path=str(config.languages_path))
            registries = AreaLanguages()

    app = FastAPI(
        title="localekit",
        version=__version__,
        description="Language registry and locale fallback resolution API.",
    )

    def registry_for(area: str) -> LanguageRegistry:
        languages = registries.get(area)
        if languages is None:
            raise HTTPException(status_code=404, detail=f"Unknown area: {area}")
        return languages

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.get("/v1/areas", response_model=list[str], tags=["languages"])
    def areas() -> list[str]:
        return registries.areas()

    @app.get(
        "/v1/areas/{area}/languages",
        response_model=list[LanguagePayload],
        tags=["languages"],
    )
    def list_languages(area: str, include_inactive: bool = False) -> list[LanguagePayload]:
        languages = registry_for(area)
        return [to_payload(language) for language in languages.all(not include_inactive)]

    @app.get(
        "/v1/areas/{area}/languages/{identifier}",
        response_model=LanguagePayload,
        tags=["languages"],
    )
    def get_language(area: str, identifier: str, fallback: bool = True) -> LanguagePayload:
        language = registry_for(area).get(parse_identifier(identifier), fallback=fallback)
        if language is None:
            raise HTTPException(status_code=404, detail=f"Language not found: {identifier}")
        return to_payload(language)

    @app.get("/v1/areas/{area}/fallbacks", tags=["languages"])
    def fallbacks(
        area: str,
        index_by: str = Query(default="locale", pattern="^(locale|key|id|slug)$"),
    ) -> dict[str, int | str]:
        mapping = registry_for(area).fallbacks(index_by)
        return {str(source): target for source, target in mapping.items()}

    @app.get("/v1/areas/{area}/resolve", response_model=ResolveResponse, tags=["languages"])
    def resolve(
        area: str,
        language: str = Query(min_length=1),
        allow_fallback: bool = True,
    ) -> ResolveResponse:
        shared = registry_for(area)
        languages = LanguageRegistry(*shared)
        requested = parse_identifier(language).value
        resolver = CurrentLanguageResolver(requested, allow_fallback_to_default=allow_fallback)
        try:
            resolved = resolver.resolve(languages)
        except ResolutionError as exc:
            raise HTTPException(
                status_code=404,
                detail=f"Current language not found: {exc.requested}",
            ) from exc
        logger.debug("language_resolved", area=area, requested=requested, locale=resolved.locale)
        return ResolveResponse(
            requested=requested,
            matched=languages.has(requested),
            language=to_payload(resolved),
        )

    return app


app = create_app()
