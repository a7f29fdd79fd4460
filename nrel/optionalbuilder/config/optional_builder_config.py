from __future__ import annotations

import logging
from typing import Dict, NamedTuple, Optional, Tuple

from nrel.optionalbuilder.config.config_builder import ConfigBuilder
from nrel.optionalbuilder.util.exception import ConfigError

log = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "nrel.optionalbuilder"


class OptionalBuilderConfig(NamedTuple):
    settings_file_path: str
    log_level: str
    verbose: bool

    @classmethod
    def default_config(cls) -> Dict:
        return {
            "log_level": "INFO",
            "verbose": False,
        }

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ("log_level",)

    @classmethod
    def build(
        cls, config: Optional[Dict] = None, settings_file_path: str = ""
    ) -> OptionalBuilderConfig:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: OptionalBuilderConfig.from_dict(c, settings_file_path),
            config=config,
        )

    @classmethod
    def from_dict(cls, d: Dict, settings_file_path: str) -> OptionalBuilderConfig:
        log_level = str(d["log_level"]).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"unknown log_level '{d['log_level']}' in {settings_file_path}")

        verbose = d.get("verbose", False)
        if not isinstance(verbose, bool):
            raise ConfigError(f"verbose must be true or false, found {verbose!r} in {settings_file_path}")

        return OptionalBuilderConfig(
            settings_file_path=settings_file_path,
            log_level=log_level,
            verbose=verbose,
        )

    def asdict(self) -> Dict:
        return self._asdict()

    def configure_logging(self) -> OptionalBuilderConfig:
        """
        applies the configured log level to the package logger

        :return: this config, unchanged
        """
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(self.log_level)

        if self.verbose:
            log.info(f"optionalbuilder settings loaded from {self.settings_file_path}")
            for k, v in self.asdict().items():
                log.info(f"  {k}: {v}")

        return self
