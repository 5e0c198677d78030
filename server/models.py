"""Request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from decaysearch.core.types import Diagnostic, GenerationParams


class VectorsRequest(BaseModel):
    query: str
    vector_count: int | None = Field(default=None, ge=1, le=20)
    density: int | None = Field(default=None, ge=128, le=1024)
    page_offset: int | None = Field(default=None, ge=0, le=9)
    launch: bool = False


class VectorItem(BaseModel):
    label: str
    url: str


class VectorsResponse(BaseModel):
    term: str
    params: GenerationParams
    urls: list[str]
    vectors: list[VectorItem]
    primary: str | None
    diagnostics: list[Diagnostic] = Field(default_factory=list)


class LogEntryResponse(BaseModel):
    id: int
    timestamp: str
    message: str
    type: str


class BootStep(BaseModel):
    message: str
    type: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    ready: bool
