"""DisplayTrimmer — 表示幅に合わせたパスの短縮。"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Final

from michi.paths._flavor import HOST, PathFlavor
from michi.paths._normalizer import (
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
)

if TYPE_CHECKING:
    from michi.fs import FileSystem

MIN_TRIM_LENGTH: Final[int] = 12
_ELLIPSIS: Final[str] = "..."
# これ以下の長さの名前は "..." で分割せず拡張子側を切り詰める
_MIN_SPLIT_NAME_LENGTH: Final[int] = 8


def _trim_bare_name(file_name: str, length: int, flavor: PathFlavor) -> str:
    extension = get_extension(file_name, flavor=flavor)
    trim_name = get_file_name_without_extension(file_name, flavor=flavor)

    if len(trim_name) > _MIN_SPLIT_NAME_LENGTH:
        if len(extension) > length - _MIN_SPLIT_NAME_LENGTH:
            extension = extension[: length - _MIN_SPLIT_NAME_LENGTH]

        offset = (length - len(extension) - len(_ELLIPSIS)) / 2
        head = math.ceil(offset)
        tail = math.floor(offset)
        return (
            trim_name[:head]
            + _ELLIPSIS
            + trim_name[len(trim_name) - tail :]
            + extension
        )

    return trim_name + extension[: length - len(trim_name)]


def trim_file_name(
    file_path: str | None,
    length: int,
    *,
    file_system: FileSystem | None = None,
    flavor: PathFlavor = HOST,
) -> str:
    """file_path を length 文字以内の表示用文字列に短縮する。

    length は最小 12 に切り上げられる。収まる場合は前後の空白を除去して
    そのまま返す。ファイル名のみの場合は拡張子を残して名前の中央を "..." に
    置き換え、ディレクトリを含む場合はディレクトリ側を末尾 "..." で切り詰める::

        trim_file_name("averylongfilename.extension", 12) == "ave...me.ext"

    Args:
        file_path: 対象パス。None は空文字列として扱う。
        length: 表示幅。
        file_system: ディレクトリ判定に使う FileSystem（get_directory_name() 参照）。
        flavor: パス文字表。

    Returns:
        短縮済みの文字列。
    """
    file_path = (file_path or "").strip()
    length = max(length, MIN_TRIM_LENGTH)

    if len(file_path) <= length:
        return file_path

    just_name = get_file_name(file_path, flavor=flavor)

    if len(just_name) == len(file_path):
        return _trim_bare_name(file_path, length, flavor)

    if len(just_name) > length:
        return trim_file_name(just_name, length, file_system=file_system, flavor=flavor)

    just_directory = get_directory_name(file_path, file_system=file_system, flavor=flavor)
    offset = length - len(just_name) - len(_ELLIPSIS) - 1

    if len(just_directory) > offset > 0:
        return just_directory[:offset] + _ELLIPSIS + flavor.separator + just_name

    # ディレクトリ部分が 1 文字も残らない場合はファイル名のみに短縮する
    return trim_file_name(just_name, length, file_system=file_system, flavor=flavor)
