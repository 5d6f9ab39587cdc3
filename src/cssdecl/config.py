from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from cssdecl.errors import InvalidLogLevelError


@dataclass(frozen=True)
class CSSDeclConfig:
    platform: str = "deferred"  # deferred, uikit, appkit, none
    stylesheet_dir: str = "."
    default_extension: str = "css"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level not in logging.getLevelNamesMapping():
            raise InvalidLogLevelError(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CSSDeclConfig:
        """Build a config from ``CSSDECL_*`` environment variables.

        Raises:
            InvalidLogLevelError: If ``CSSDECL_LOG_LEVEL`` is not a level name.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            platform=env.get("CSSDECL_PLATFORM", defaults.platform),
            stylesheet_dir=env.get("CSSDECL_STYLESHEET_DIR", defaults.stylesheet_dir),
            default_extension=env.get(
                "CSSDECL_DEFAULT_EXTENSION", defaults.default_extension
            ),
            log_level=env.get("CSSDECL_LOG_LEVEL", defaults.log_level).upper(),
        )
