"""PathNormalizer — パス文字列の正規化プリミティブ。

末尾区切り文字の付与・除去、ディレクトリ部分とファイル名部分の抽出、
ルートの除去、絶対パス化を提供する。
区切り文字はプライマリ・代替のいずれも論理的に等価として扱う。
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

from michi.paths._errors import InvalidPathArgumentError
from michi.paths._flavor import HOST, PathFlavor

if TYPE_CHECKING:
    from michi.fs import FileSystem


def add_path_suffix(file_path: str, *, flavor: PathFlavor = HOST) -> str:
    """末尾に区切り文字が 1 つ存在することを保証する。

    空文字列は区切り文字 1 文字になる。既に区切り文字（どちらの種類でも）で
    終わっている場合はそのまま返す。
    """
    if not file_path:
        return flavor.separator
    if not flavor.is_separator(file_path[-1]):
        return file_path + flavor.separator
    return file_path


def remove_path_suffix(file_path: str | None, *, flavor: PathFlavor = HOST) -> str:
    """末尾の区切り文字（どちらの種類でも）をすべて除去する。None は空文字列になる。"""
    if not file_path:
        return ""
    return file_path.rstrip(flavor.separators)


def _last_separator_index(file_path: str, flavor: PathFlavor) -> int:
    return max(file_path.rfind(c) for c in flavor.separators)


def join_path(directory: str, name: str, *, flavor: PathFlavor = HOST) -> str:
    """ディレクトリとファイル名を連結する。

    name がルートを持つ場合は name を返す。directory が空なら name を返す。
    """
    if not directory or flavor.is_path_rooted(name):
        return name
    if flavor.is_separator(directory[-1]):
        return directory + name
    return directory + flavor.separator + name


def _parent_directory(file_path: str, flavor: PathFlavor) -> str | None:
    """構文上の親ディレクトリを返す。

    ルートそのものには親が無いので None を返す。区切り文字を含まない
    名前は空文字列、ルート直下の名前はルートを返す。
    """
    root = flavor.get_path_root(file_path)
    if len(file_path) <= len(root):
        return None
    index = _last_separator_index(file_path, flavor)
    if index < len(root):
        return root
    # 連続する区切り文字は 1 つの区切りとして扱う（ルートは削らない）
    while index > len(root) and flavor.is_separator(file_path[index - 1]):
        index -= 1
    return file_path[:index]


def get_directory_name(
    file_path: str,
    *,
    file_system: FileSystem | None = None,
    flavor: PathFlavor = HOST,
) -> str:
    """ディレクトリ部分を区切り文字終端で返す。

    単純な「最後の区切り文字より前」の分割と異なり、入力全体が既存の
    ディレクトリを指す場合は全体をディレクトリとして扱う。
    file_system が None の場合は存在確認を行わず構文上の分割のみ行う。

    Args:
        file_path: 対象パス。
        file_system: ディレクトリ存在確認に使う FileSystem。
        flavor: パス文字表。

    Returns:
        区切り文字で終わるディレクトリパス。
    """
    directory_name = add_path_suffix(file_path, flavor=flavor)

    if file_system is not None and file_system.directory_exists(directory_name):
        return directory_name

    parent = _parent_directory(file_path, flavor)
    return add_path_suffix(file_path if parent is None else parent, flavor=flavor)


def get_last_directory_name(
    file_path: str,
    *,
    file_system: FileSystem | None = None,
    flavor: PathFlavor = HOST,
) -> str:
    """最後のディレクトリ名を返す。

    get_directory_name() の結果に対して動作するため、区切り文字で終わる
    入力の最終要素はディレクトリ、そうでない入力の最終要素はファイル名
    （破棄される）として扱われる::

        get_last_directory_name("/test/sub")  == "test"
        get_last_directory_name("/test/sub/") == "sub"

    Raises:
        InvalidPathArgumentError: file_path が空の場合。
    """
    if not file_path:
        raise InvalidPathArgumentError("file_path", "Path cannot be null or empty")

    directory = remove_path_suffix(
        get_directory_name(file_path, file_system=file_system, flavor=flavor),
        flavor=flavor,
    )
    delimiters = flavor.separators + flavor.volume_separator
    index = max(directory.rfind(c) for c in delimiters)
    return directory[index + 1 :]


def get_file_name(file_path: str, *, flavor: PathFlavor = HOST) -> str:
    """最後の区切り文字（Windows ではボリューム区切り文字も）より後ろを返す。"""
    delimiters = flavor.separators
    if flavor.has_drive_roots:
        delimiters += flavor.volume_separator
    index = max(file_path.rfind(c) for c in delimiters)
    return file_path[index + 1 :]


def _split_extension(file_name: str) -> tuple[str, str]:
    index = file_name.rfind(".")
    if index == -1:
        return file_name, ""
    if index == len(file_name) - 1:
        # 末尾のドットは拡張子として扱わない
        return file_name[:index], ""
    return file_name[:index], file_name[index:]


def get_extension(file_path: str, *, flavor: PathFlavor = HOST) -> str:
    """拡張子（ドットを含む）を返す。末尾の区切り文字は先に除去する。"""
    name = get_file_name(remove_path_suffix(file_path, flavor=flavor), flavor=flavor)
    return _split_extension(name)[1]


def get_file_name_without_extension(file_path: str, *, flavor: PathFlavor = HOST) -> str:
    """拡張子を除いたファイル名を返す。末尾の区切り文字は先に除去する。"""
    name = get_file_name(remove_path_suffix(file_path, flavor=flavor), flavor=flavor)
    return _split_extension(name)[0]


def drop_path_root(file_path: str | None, *, flavor: PathFlavor = HOST) -> str:
    """パスのルート（ドライブ・UNC・先頭区切り文字）を除去する。"""
    if not file_path:
        return ""
    return file_path[len(flavor.get_path_root(file_path)) :]


def _default_base_directory() -> str:
    """実行中のエントリスクリプトのディレクトリ。取得できなければカレントディレクトリ。"""
    entry = sys.argv[0] if sys.argv else ""
    if entry:
        return os.path.dirname(os.path.abspath(entry))
    return os.getcwd()


def get_absolute_path(
    file_path: str,
    base_directory: str | None = None,
    *,
    flavor: PathFlavor = HOST,
) -> str:
    """ルートを持たないパスを base_directory に連結し、末尾の区切り文字を除去する。

    Args:
        file_path: 対象パス。
        base_directory: 連結先。None の場合はエントリスクリプトのディレクトリ。
        flavor: パス文字表。

    Returns:
        末尾区切り文字を持たない絶対パス。
    """
    if not flavor.is_path_rooted(file_path):
        base = base_directory if base_directory is not None else _default_base_directory()
        file_path = join_path(base, file_path, flavor=flavor)
    return remove_path_suffix(file_path, flavor=flavor)
