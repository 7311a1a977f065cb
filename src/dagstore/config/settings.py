"""DagSettings: CLI flags, ``DAGSTORE_*`` env vars and ``dagstore.toml`` merged.

Sources, highest priority first:

1. keyword arguments (the CLI flags)
2. ``DAGSTORE_*`` environment variables, ``__`` between nested keys
3. the TOML file chosen by :meth:`DagSettings.from_cli`
4. defaults on the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from dagstore.config.discovery import find_config, read_toml
from dagstore.config.models import CodecConfig, OutputConfig

# TOML file for the settings object currently being built.
_toml_path: ContextVar[Path | None] = ContextVar("dagstore_toml_path", default=None)


class DagSettings(BaseSettings):
    """Effective settings for one CLI invocation."""

    model_config = {
        "frozen": True,
        "env_prefix": "DAGSTORE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    codec: CodecConfig = Field(default_factory=CodecConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _toml_path.get()
        toml_data: dict[str, Any] = read_toml(toml_path) if toml_path else {}
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, init_kwargs=toml_data),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DagSettings:
        """Build settings for a CLI run.

        An explicit *config_path* must name an existing file; otherwise
        ``dagstore.toml`` is discovered by walking up from *start* (default CWD).

        Raises:
            click.ClickException: If *config_path* is missing or the TOML is invalid.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {toml_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start)

        token = _toml_path.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _toml_path.reset(token)
