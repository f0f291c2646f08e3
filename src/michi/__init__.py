"""シェル形式のファイル指定パターン照合とパス文字列ユーティリティ。

よく使う関数はパッケージ直下から参照できる::

    from michi import is_file_pattern_match

    is_file_pattern_match("**/*.py", "src/app/main.py")
"""

from michi.paths import (
    get_directory_name,
    get_last_directory_name,
    get_unique_file_path,
    trim_file_name,
)
from michi.pattern import compile_file_pattern, get_matcher, is_file_pattern_match

__all__ = [
    "compile_file_pattern",
    "get_directory_name",
    "get_last_directory_name",
    "get_matcher",
    "get_unique_file_path",
    "is_file_pattern_match",
    "trim_file_name",
]
