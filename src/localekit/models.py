"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LanguageSpec(BaseModel):
    """Partial language definition consumed by the language factory."""

    model_config = ConfigDict(extra="forbid")

    locale: str = Field(min_length=1)
    name: str | None = None
    key: str | None = None
    id: int = Field(default=0, ge=0)
    iso: str | None = None
    region: str | None = None
    slug: str | None = None
    directory: str | None = None
    direction: Literal["ltr", "rtl"] = "ltr"
    area: str = Field(default="default", min_length=1)
    domain: str | None = None
    url: str | None = None
    fallback: str | None = None
    default: bool = False
    active: bool = True
    editable: bool = True
    order: int = 0


class LanguagePayload(BaseModel):
    """Serialized language record."""

    model_config = ConfigDict(from_attributes=True)

    locale: str
    iso: str
    region: str | None
    name: str
    key: str
    id: int
    slug: str
    directory: str
    direction: Literal["ltr", "rtl"]
    area: str
    domain: str | None
    url: str | None
    fallback: str | None
    default: bool
    active: bool
    editable: bool
    order: int


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class ResolveResponse(BaseModel):
    """Outcome of resolving a requested language."""

    requested: int | str
    matched: bool
    language: LanguagePayload
