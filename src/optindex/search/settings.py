"""Search settings – strategy and logging options read from ``OPTINDEX_*``."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from optindex.config.settings import Settings
from optindex.config.validation import InvalidSettingValueError
from optindex.search.strategies import available_strategies


@dataclass
class SearchSettings(Settings):
    _prefix: ClassVar[str] = "OPTINDEX"

    strategy: str = "scan"
    log_level: str = "INFO"
    log_json: bool = True

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper()

    def _validate(self) -> None:
        strategies = available_strategies()
        if self.strategy not in strategies:
            raise InvalidSettingValueError(
                self.env_key("strategy"),
                self.strategy,
                "no search strategy registered under this name",
                allowed=strategies,
            )
        levels = [name for name in logging.getLevelNamesMapping() if name not in ("NOTSET", "WARN", "FATAL")]
        if self.log_level.upper() not in levels:
            raise InvalidSettingValueError(
                self.env_key("log_level"),
                self.log_level,
                "not a logging level name",
                allowed=levels,
            )


__all__ = ["SearchSettings"]
