"""decaysearch configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from decaysearch.core.builder import DEFAULT_ENDPOINT, DENSITY_RISK_THRESHOLD
from decaysearch.core.types import GenerationParams
from decaysearch.exceptions import ConfigError

ENV_PREFIX = "DECAYSEARCH_"

PRESETS: dict[str, GenerationParams] = {
    "terminal": GenerationParams(vector_count=10, density=257, page_offset=0),
    "quick": GenerationParams(vector_count=5, density=128, page_offset=0),
    "deep": GenerationParams(vector_count=20, density=700, page_offset=0),
}


class DecaySearchConfig(BaseModel):
    """Defaults a caller supplies to the core for every request."""

    endpoint: str = DEFAULT_ENDPOINT
    vector_count: int = Field(default=10, ge=1, le=20)
    density: int = Field(default=257, ge=128, le=1024)
    page_offset: int = Field(default=0, ge=0, le=9)
    density_risk_threshold: int = DENSITY_RISK_THRESHOLD
    boot_delay: float = Field(default=0.4, ge=0.0)
    auto_launch: bool = True

    @property
    def params(self) -> GenerationParams:
        return GenerationParams(
            vector_count=self.vector_count,
            density=self.density,
            page_offset=self.page_offset,
        )

    @classmethod
    def from_preset(cls, name: str, **overrides) -> DecaySearchConfig:
        try:
            preset = PRESETS[name]
        except KeyError:
            raise ConfigError(f"Unknown preset {name!r} (choose from {', '.join(PRESETS)})")
        return cls(**{**preset.model_dump(), **overrides})

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> DecaySearchConfig:
        """Build a config from ``DECAYSEARCH_*`` environment variables."""
        env = os.environ if environ is None else environ
        fields: dict[str, object] = {}
        for name, cast in (
            ("vector_count", int),
            ("density", int),
            ("page_offset", int),
            ("density_risk_threshold", int),
            ("boot_delay", float),
        ):
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            try:
                fields[name] = cast(raw)
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}{name.upper()} must be a number, got {raw!r}")
        if endpoint := env.get(ENV_PREFIX + "ENDPOINT"):
            fields["endpoint"] = endpoint
        auto_launch = env.get(ENV_PREFIX + "AUTO_LAUNCH")
        if auto_launch is not None:
            fields["auto_launch"] = auto_launch.strip().lower() in ("1", "true", "yes", "on")
        try:
            return cls(**fields)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
