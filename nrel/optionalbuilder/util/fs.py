from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from nrel.optionalbuilder.config.optional_builder_config import OptionalBuilderConfig

SETTINGS_FILE_NAME = ".optionalbuilder.yaml"


def _backprop_search(search_path: Path) -> Optional[Path]:
    """
    searches up the path to the root of the file system for a settings file
    """
    try:
        search_file = search_path.joinpath(SETTINGS_FILE_NAME)
        if search_file.is_file():
            return search_file
        else:
            updated_search_path = search_path.parent
            if updated_search_path == search_path:
                return None
            else:
                return _backprop_search(updated_search_path)
    except FileNotFoundError:
        return None


def global_config_search() -> OptionalBuilderConfig:
    """
    searches for a settings file, and if found, loads it on top of the defaults
    shipped in nrel.optionalbuilder.resources. files found in the working directory
    tree are preferred over one in the user home directory.

    :return: the optionalbuilder settings
    """
    default_file = resources.files("nrel.optionalbuilder.resources.defaults").joinpath(
        SETTINGS_FILE_NAME
    )
    default = yaml.safe_load(default_file.read_text())

    try:
        cwd = Path.cwd()
    except FileNotFoundError:
        cwd = Path("~/").expanduser()

    file_found_in_backprop = _backprop_search(cwd)
    file_at_home_directory = Path.home().joinpath(SETTINGS_FILE_NAME)

    file_found = (
        file_found_in_backprop
        if file_found_in_backprop
        else file_at_home_directory
        if file_at_home_directory.is_file()
        else None
    )
    if file_found:
        with file_found.open() as f:
            overrides = yaml.safe_load(f)
            if overrides:
                default.update(overrides)
            return OptionalBuilderConfig.build(default, str(file_found))
    else:
        return OptionalBuilderConfig.build(default, str(default_file))
