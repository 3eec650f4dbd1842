"""Environment-derived settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .constants import ENV_DEBUG, ENV_LOG_FILE
from .variants import ToolVariant


def is_feature_enabled(var_name: str, environ: Mapping[str, str] | None = None) -> bool:
    """Any non-empty value enables the toggle."""
    env = os.environ if environ is None else environ
    return bool(env.get(var_name, ""))


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    fallback_enabled: bool = False
    ignore_picker: bool = False
    debug: bool = False
    log_file: Path | None = None

    @classmethod
    def from_env(
        cls,
        variant: ToolVariant,
        environ: Mapping[str, str] | None = None,
    ) -> Settings:
        """Build settings for a variant. Empty values count as unset."""
        env = os.environ if environ is None else environ
        log_file_raw = env.get(ENV_LOG_FILE, "")
        return cls(
            fallback_enabled=is_feature_enabled(variant.fallback_env_var, env),
            ignore_picker=is_feature_enabled(variant.ignore_picker_env_var, env),
            debug=is_feature_enabled(ENV_DEBUG, env),
            log_file=Path(log_file_raw).expanduser() if log_file_raw else None,
        )
