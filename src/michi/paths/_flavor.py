"""PathFlavor — プラットフォーム別のパス文字表。

区切り文字（プライマリ・代替）、ボリューム区切り文字、
ファイル名・パスとして不正な文字集合を保持する不変の定数テーブル。
POSIX / WINDOWS の 2 種類をモジュール読み込み時に一度だけ構築する。
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property

# NUL と U+0001..U+001F の制御文字
_CONTROL_CHARS: str = "".join(chr(c) for c in range(32))


def _encode_class_char(c: str) -> str:
    """文字クラス内で使える表記に変換する。制御文字は \\xHH で表す。"""
    if c.isprintable():
        return re.escape(c)
    return f"\\x{ord(c):02x}"


class PathStyle(StrEnum):
    """パス表記スタイル。設定ファイルと CLI の --style で指定される。"""

    HOST = "host"
    POSIX = "posix"
    WINDOWS = "windows"


@dataclass(frozen=True)
class PathFlavor:
    """パス文字表。

    Attributes:
        name: 表示用の名前。
        separator: プライマリのディレクトリ区切り文字。
        alt_separator: 代替のディレクトリ区切り文字（POSIX ではプライマリと同一）。
        volume_separator: ボリューム区切り文字（Windows の ":"）。
        invalid_file_name_chars: ファイル名に使用できない文字。
        invalid_path_chars: パスに使用できない文字。
        has_drive_roots: ドライブ文字・UNC のルートを認識するか。
    """

    name: str
    separator: str
    alt_separator: str
    volume_separator: str
    invalid_file_name_chars: frozenset[str]
    invalid_path_chars: frozenset[str]
    has_drive_roots: bool

    @cached_property
    def separators(self) -> str:
        """重複を除いた区切り文字列（プライマリが先頭）。"""
        return "".join(dict.fromkeys(self.separator + self.alt_separator))

    @cached_property
    def separator_class(self) -> str:
        """区切り文字 1 文字にマッチする正規表現の文字クラス。"""
        return "[" + "".join(re.escape(c) for c in self.separators) + "]"

    @cached_property
    def file_name_char_class(self) -> str:
        """ファイル名として有効な 1 文字にマッチする正規表現の文字クラス。

        不正なファイル名文字以外のすべてを許可する。"?" ワイルドカードの展開結果。
        """
        invalid = sorted(self.invalid_file_name_chars)
        encoded = "".join(_encode_class_char(c) for c in invalid)
        return f"[^{encoded}]"

    @cached_property
    def _root_re(self) -> re.Pattern[str]:
        seps = self.separator_class
        if not self.has_drive_roots:
            return re.compile(seps)
        not_sep = f"[^{seps[1:-1]}]"
        return re.compile(
            rf"[A-Za-z]:{seps}?"  # C:\ または C:
            rf"|{seps}{{2}}{not_sep}+(?:{seps}{not_sep}+)?"  # \\server\share
            rf"|{seps}"
        )

    def is_separator(self, c: str) -> bool:
        return c in self.separators

    def get_path_root(self, path: str) -> str:
        """パスのルート部分を返す。ルートを持たない場合は空文字列。"""
        if not path:
            return ""
        m = self._root_re.match(path)
        return m.group(0) if m else ""

    def is_path_rooted(self, path: str) -> bool:
        """パスがルート（ドライブ・UNC・先頭区切り文字）を持つか判定する。"""
        return bool(self.get_path_root(path))


POSIX = PathFlavor(
    name="posix",
    separator="/",
    alt_separator="/",
    volume_separator="/",
    invalid_file_name_chars=frozenset("\0/"),
    invalid_path_chars=frozenset("\0"),
    has_drive_roots=False,
)

WINDOWS = PathFlavor(
    name="windows",
    separator="\\",
    alt_separator="/",
    volume_separator=":",
    invalid_file_name_chars=frozenset('"<>|:*?\\/' + _CONTROL_CHARS),
    invalid_path_chars=frozenset("|" + _CONTROL_CHARS),
    has_drive_roots=True,
)

HOST = WINDOWS if os.name == "nt" else POSIX

_FLAVORS_BY_STYLE: dict[PathStyle, PathFlavor] = {
    PathStyle.HOST: HOST,
    PathStyle.POSIX: POSIX,
    PathStyle.WINDOWS: WINDOWS,
}


def flavor_for_style(style: PathStyle) -> PathFlavor:
    """PathStyle に対応する PathFlavor を返す。"""
    return _FLAVORS_BY_STYLE[style]
