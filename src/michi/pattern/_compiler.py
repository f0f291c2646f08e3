"""PatternCompiler — ファイル指定パターンから正規表現への変換。

ホストの glob 実装は使わず、パターンを左から走査し、各位置で以下の規則を
番号順に試して最初に一致したものを適用する:

1. 区切り文字の連続        → 区切り文字（どちらの種類でも）1 文字以上
2. "?"                    → ファイル名として有効な 1 文字
3. "**" + 区切り文字の連続 → 0 個以上のパス要素（"名前 + 区切り文字" の繰り返し）
4. "*"                    → ファイル名として有効な 0 文字以上（区切り文字は越えない）
5. その他の文字            → その文字自身（エスケープ済み）

区切り文字を伴わない "**" は規則 4 が 2 回適用され、"*" と等価になる。
"""

from __future__ import annotations

import re
from functools import cache, lru_cache

from michi.paths import HOST, PathFlavor

_SEPARATOR_RUN_GROUP = "separators"
_ANY_CHAR_GROUP = "any_char"
_RECURSIVE_DIR_GROUP = "recursive_dir"
_ANY_NAME_GROUP = "any_name"

# re.escape はパターン文字列ごとに繰り返し呼ばれるためキャッシュする
_re_escape = lru_cache(maxsize=512)(re.escape)


@cache
def _token_re(flavor: PathFlavor) -> re.Pattern[str]:
    """flavor ごとのトークン走査用正規表現。alternation の順序が優先順位になる。"""
    seps = flavor.separator_class
    return re.compile(
        rf"(?P<{_SEPARATOR_RUN_GROUP}>{seps}+)"
        rf"|(?P<{_ANY_CHAR_GROUP}>\?)"
        rf"|(?P<{_RECURSIVE_DIR_GROUP}>\*\*{seps}+)"
        rf"|(?P<{_ANY_NAME_GROUP}>\*)"
    )


@cache
def _replacements(flavor: PathFlavor) -> dict[str, str]:
    """トークン種別ごとの置換先正規表現。"""
    seps = flavor.separator_class
    name_char = flavor.file_name_char_class
    return {
        _SEPARATOR_RUN_GROUP: f"{seps}+",
        _ANY_CHAR_GROUP: name_char,
        # 名前文字と区切り文字は互いに素なので所有的量指定子で曖昧さを排除できる
        _RECURSIVE_DIR_GROUP: f"(?:{name_char}*+{seps}++)*",
        _ANY_NAME_GROUP: f"{name_char}*",
    }


def compile_file_pattern(file_spec: str, *, flavor: PathFlavor = HOST) -> str:
    """ファイル指定パターンを、パス全体にマッチする正規表現文字列へ変換する。

    パターン自体の妥当性（不正なファイル名文字の有無）は検証しない。
    不正文字もリテラルとして扱われる。

    Args:
        file_spec: "*", "?", "**" を含み得るファイル指定パターン。
        flavor: パス文字表。

    Returns:
        先頭・末尾でアンカーされた正規表現文字列。
    """
    token_re = _token_re(flavor)
    replacements = _replacements(flavor)

    output: list[str] = []
    pos = 0
    while pos < len(file_spec):
        m = token_re.match(file_spec, pos)
        if m is not None and m.lastgroup is not None:
            output.append(replacements[m.lastgroup])
            pos = m.end()
        else:
            output.append(_re_escape(file_spec[pos]))
            pos += 1

    return "^" + "".join(output) + r"\Z"
