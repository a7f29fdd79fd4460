from nrel.optionalbuilder.util.exception import (
    CombinationFailure,
    ConfigError,
)
from nrel.optionalbuilder.util.maybe_ops import MaybeOps
