"""Configuration models using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseModel):
    """Catalog store configuration."""

    queue_size: int = Field(default=100, ge=1)  # Change feed capacity


class GeneratorConfig(BaseModel):
    """Background data generator configuration."""

    enabled: bool = True
    initial_count: int = Field(default=1000, ge=0)  # Per kind
    interval: float = Field(default=2.0, gt=0)
    seed: int | None = None


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    structured: bool = True


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOGD_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    store: StoreConfig = Field(default_factory=StoreConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logs: LogConfig = Field(default_factory=LogConfig)
    @classmethod
    def from_yaml(cls, path: Path | str) -> Config:
        """Load configuration from a YAML file; an empty file gives defaults."""
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Write the configuration as YAML, keeping section order."""
        import yaml

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False))

    def with_overrides(self, overrides: dict[str, dict[str, Any]]) -> Config:
        """Return a copy with the given section fields replaced.

        ``None`` values are skipped, so unset command-line options leave the
        loaded value in place. Unknown sections raise ``KeyError``.
        """
        data = self.model_dump()
        for section, fields in overrides.items():
            if section not in data:
                raise KeyError(f"Unknown config section: {section}")
            data[section].update({k: v for k, v in fields.items() if v is not None})
        return type(self)(**data)
