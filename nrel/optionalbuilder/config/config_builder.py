from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


class ConfigBuilder:
    @classmethod
    def build(
        cls,
        default_config: Dict,
        required_config: Tuple[str, ...],
        config_constructor: Callable[[Dict], T],
        config: Optional[Dict] = None,
    ) -> T:
        """
        overlays a settings Dict on top of the defaults, checks for required keys,
        and hands the result to a constructor

        :param default_config: a dictionary containing default config values
        :param required_config: keys which must hold a non-null value after merging
        :param config_constructor: a function that takes a dict and builds a Config object
        :param config: the Dict containing attributes to load for this Config
        :return: a Config
        :raises: AttributeError when a required key is missing
        """
        merged = {**default_config, **config} if config else dict(default_config)

        missing = tuple(key for key in required_config if merged.get(key) is None)
        if missing:
            raise AttributeError(f"expected required config keys {missing} not found")

        return config_constructor(merged)
