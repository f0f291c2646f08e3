"""パス正規化・検証・一意名探索・表示短縮。"""

from michi.paths._errors import InvalidPathArgumentError, InvalidPathCharactersError
from michi.paths._flavor import (
    HOST,
    POSIX,
    WINDOWS,
    PathFlavor,
    PathStyle,
    flavor_for_style,
)
from michi.paths._normalizer import (
    add_path_suffix,
    drop_path_root,
    get_absolute_path,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    get_last_directory_name,
    join_path,
    remove_path_suffix,
)
from michi.paths._trim import MIN_TRIM_LENGTH, trim_file_name
from michi.paths._unique import get_unique_file_path
from michi.paths._validation import (
    get_valid_file_name,
    get_valid_file_path,
    is_valid_file_name,
    validate_path_name,
)

__all__ = [
    "HOST",
    "InvalidPathArgumentError",
    "InvalidPathCharactersError",
    "MIN_TRIM_LENGTH",
    "POSIX",
    "PathFlavor",
    "PathStyle",
    "WINDOWS",
    "add_path_suffix",
    "drop_path_root",
    "flavor_for_style",
    "get_absolute_path",
    "get_directory_name",
    "get_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "get_last_directory_name",
    "get_unique_file_path",
    "get_valid_file_name",
    "get_valid_file_path",
    "is_valid_file_name",
    "join_path",
    "remove_path_suffix",
    "trim_file_name",
    "validate_path_name",
]
