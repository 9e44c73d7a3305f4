"""Run configuration for the mode-config generator.

``GeneratorConfig`` validates the inputs of one generation run and resolves
where the registry file is written.
"""

import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from rooMaestro.roomodes.mode_generation import DEFAULT_MODE_NAMES
from rooMaestro.roomodes.serialization import OutputFormat
from rooMaestro.roomodes.utils import slugify

DEFAULT_ROOMODES_PATH = ".roomodes"
GLOBAL_SETTINGS_ENV = "ROO_GLOBAL_SETTINGS_DIR"
ROO_EXTENSION_ID = "rooveterinaryinc.roo-cline"


class ModeConfigError(ValueError):
    """Raised for a generator configuration that cannot produce a registry."""


def default_global_settings_dir() -> Path:
    """Settings folder of the Roo Code extension in VS Code's global storage."""
    env_dir = os.environ.get(GLOBAL_SETTINGS_ENV)
    if env_dir:
        return Path(env_dir)

    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "Code" / "User" / "globalStorage" / ROO_EXTENSION_ID / "settings"


class GeneratorConfig(BaseModel):
    mode_names: List[str] = Field(default_factory=lambda: list(DEFAULT_MODE_NAMES))
    output_path: Optional[Path] = None
    use_global: bool = False
    output_format: OutputFormat = "yaml"
    markdown_dir: Optional[Path] = None

    @field_validator("mode_names")
    @classmethod
    def validate_mode_names(cls, names: List[str]) -> List[str]:
        if not names:
            raise ValueError("at least one mode name is required")
        seen = set()
        for name in names:
            if not name.strip():
                raise ValueError("mode names must not be blank")
            slug = slugify(name)
            if slug in seen:
                raise ValueError(f'duplicate mode slug "{slug}"')
            seen.add(slug)
        return names

    @model_validator(mode="after")
    def check_output_target(self) -> "GeneratorConfig":
        if self.use_global and self.output_path is not None:
            raise ValueError("an explicit output path cannot be combined with the global target")
        return self

    def resolve_output_path(self) -> Path:
        """Effective file the registry is written to."""
        if self.output_path is not None:
            return self.output_path
        if self.use_global:
            suffix = "json" if self.output_format == "json" else "yaml"
            return default_global_settings_dir() / f"custom_modes.{suffix}"
        return Path(DEFAULT_ROOMODES_PATH)


def build_config(**options: Any) -> GeneratorConfig:
    """Validate ``options`` into a ``GeneratorConfig``.

    Raises:
        ModeConfigError: With the first validation message, e.g.
            ``duplicate mode slug "coder"``.
    """
    try:
        return GeneratorConfig(**options)
    except ValidationError as e:
        error = e.errors()[0]
        message = error["msg"].removeprefix("Value error, ")
        field = ".".join(str(part) for part in error["loc"])
        raise ModeConfigError(f"{field}: {message}" if field else message) from None
