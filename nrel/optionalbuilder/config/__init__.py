from nrel.optionalbuilder.config.config_builder import ConfigBuilder
from nrel.optionalbuilder.config.optional_builder_config import OptionalBuilderConfig
