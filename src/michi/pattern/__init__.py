"""ファイル指定パターンのコンパイルと照合。"""

from michi.pattern._compiler import compile_file_pattern
from michi.pattern._matcher import CompiledMatcher, get_matcher, is_file_pattern_match

__all__ = [
    "CompiledMatcher",
    "compile_file_pattern",
    "get_matcher",
    "is_file_pattern_match",
]
