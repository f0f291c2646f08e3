"""CompiledMatcher — ファイル指定パターンの照合。

ルート相対パターン（"**/" または単独の区切り文字で始まるパターン）は、
照合対象がルートを持つ場合にルート文字列（ドライブ・UNC・先頭区切り文字）を
問わずマッチするよう、双方の先頭区切り文字とパスのルートを除去してから照合する。
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cache, lru_cache

from michi.paths import HOST, PathFlavor
from michi.pattern._compiler import compile_file_pattern

_MATCHER_CACHE_SIZE = 512


@cache
def _root_spec_re(flavor: PathFlavor) -> re.Pattern[str]:
    """パターン先頭のルート相対表記を検出する正規表現。

    "**" + 区切り文字、または区切り文字の直後が非区切り文字・終端の場合にマッチする。
    """
    alternatives = [r"\*\*" + flavor.separator_class]
    for sep in dict.fromkeys((flavor.separator, flavor.alt_separator)):
        escaped = re.escape(sep)
        alternatives.append(rf"{escaped}(?:[^{escaped}]|\Z)")
    return re.compile("|".join(alternatives))


@dataclass(frozen=True)
class CompiledMatcher:
    """1 つのファイル指定パターンから導出される不変の照合器。

    同じ (file_spec, ignore_case, flavor) からは常に同じ照合器が得られる。

    Attributes:
        file_spec: 元のファイル指定パターン。
        ignore_case: 大文字小文字を区別しないか。
        flavor: パス文字表。
    """

    file_spec: str
    ignore_case: bool = False
    flavor: PathFlavor = HOST
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _root_relative_regex: re.Pattern[str] | None = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.ignore_case else 0
        regex = re.compile(compile_file_pattern(self.file_spec, flavor=self.flavor), flags)
        root_relative: re.Pattern[str] | None = None
        if _root_spec_re(self.flavor).match(self.file_spec):
            relative_spec = self.file_spec.lstrip(self.flavor.separators)
            root_relative = re.compile(
                compile_file_pattern(relative_spec, flavor=self.flavor), flags
            )
        # frozen dataclass のため構築時のみ object.__setattr__ で設定する
        object.__setattr__(self, "_regex", regex)
        object.__setattr__(self, "_root_relative_regex", root_relative)

    @property
    def pattern(self) -> str:
        """照合に使う正規表現文字列。"""
        return self._regex.pattern

    def matches(self, file_path: str) -> bool:
        """file_path 全体がパターンにマッチするか判定する。"""
        if self._root_relative_regex is not None and self.flavor.is_path_rooted(file_path):
            root = self.flavor.get_path_root(file_path)
            relative_path = file_path[len(root) :].lstrip(self.flavor.separators)
            return self._root_relative_regex.match(relative_path) is not None
        return self._regex.match(file_path) is not None


@lru_cache(maxsize=_MATCHER_CACHE_SIZE)
def get_matcher(
    file_spec: str,
    ignore_case: bool = False,
    *,
    flavor: PathFlavor = HOST,
) -> CompiledMatcher:
    """CompiledMatcher を返す。導出は純粋なためスレッドセーフな LRU キャッシュを使う。"""
    return CompiledMatcher(file_spec, ignore_case, flavor)


def is_file_pattern_match(
    file_specs: str | Iterable[str],
    file_path: str | None,
    ignore_case: bool = False,
    *,
    flavor: PathFlavor = HOST,
) -> bool:
    """file_path がいずれかのファイル指定パターンにマッチするか判定する。

    None・空・空白のみのパスはどのパターンにもマッチしない。

    Args:
        file_specs: ファイル指定パターン、またはそのシーケンス。
        file_path: 照合対象のパス。
        ignore_case: 大文字小文字を区別しないか。
        flavor: パス文字表。

    Returns:
        いずれかのパターンにマッチすれば True。
    """
    if file_path is None or not file_path.strip():
        return False

    specs = (file_specs,) if isinstance(file_specs, str) else file_specs
    return any(
        get_matcher(spec, ignore_case, flavor=flavor).matches(file_path) for spec in specs
    )
