"""Unified settings — CLI flags and config sections in one frozen object.

The program takes no environment variables and no config files, so the
only source is init kwargs (the CLI flags passed by Click). Everything
else comes from the code defaults in :mod:`rosterctl.config.models`.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rosterctl.config.models import FormatConfig, ReportConfig


class RosterSettings(BaseSettings):
    """Settings for a single report run.

    Stored on the :class:`~rosterctl.commands._context.AppContext` at the
    CLI root level.

    Attributes:
        as_of: Reference date for ages and the future-birth-date check.
            None means the system date at the time of the call.
    """

    model_config = {"frozen": True}

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    as_of: date | None = None

    # --- Sections ---
    report: ReportConfig = Field(default_factory=ReportConfig)
    display: FormatConfig = Field(default_factory=FormatConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs only; environment and dotenv are ignored."""
        return (init_settings,)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> RosterSettings:
        """Construct settings from a CLI invocation, dropping unset flags."""
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})

    def reference_date(self) -> date:
        return self.as_of or date.today()
