__doc__ = r"""
**optionalbuilder** combines two independently-optional values into a single
derived optional value. Values are carried as `returns.maybe.Maybe`; a
combiner runs only when both are present, and absence propagates otherwise.
Builders can be made from plain values, from two concurrent.futures.Future
objects (blocking join) or from two asyncio awaitables (cooperative join).

    >>> from returns.maybe import Some
    >>> OptionalBuilder.of(Some(10), Some(20)).merge(lambda a, b: a + b)
    <Some: 30>
"""

import logging

from nrel.optionalbuilder.config import OptionalBuilderConfig
from nrel.optionalbuilder.optional_builder import MergeResult, OptionalBuilder
from nrel.optionalbuilder.util.exception import CombinationFailure
from nrel.optionalbuilder.util.fs import global_config_search

from rich.logging import RichHandler


FORMAT = "%(message)s"
rich_handler = RichHandler(markup=True, rich_tracebacks=True, show_time=False, show_path=False)
logging.basicConfig(
    level=logging.INFO,
    format=FORMAT,
    handlers=[rich_handler],
)
