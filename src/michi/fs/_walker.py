"""DirectoryWalker — 部分的な失敗に耐えるディレクトリ列挙。

あるサブディレクトリの列挙に失敗しても走査全体は中断せず、
失敗は EnumerationError として呼び出し側のハンドラーに報告される。
ハンドラーが無い場合は WARNING ログを出して続行する。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from michi.fs._interfaces import DirectoryLister
from michi.fs._local import LocalFileSystem
from michi.paths import (
    HOST,
    PathFlavor,
    get_directory_name,
    get_file_name,
    get_last_directory_name,
)

logger = logging.getLogger(__name__)

_ALL_ENTRIES = "*"
# パス末尾のディレクトリ名がこれの場合はサブディレクトリも列挙する
_RECURSIVE_MARKER = "*"


class EnumerationError(Exception):
    """1 ディレクトリの列挙失敗。走査全体の失敗ではない。

    Attributes:
        path: 列挙に失敗したディレクトリ。
        cause: 元の OSError。
    """

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Failed to enumerate '{path}': {cause}")
        self.path = path
        self.cause = cause


ExceptionHandler = Callable[[EnumerationError], None]


def _report(path: str, cause: OSError, handler: ExceptionHandler | None) -> None:
    error = EnumerationError(path, cause)
    if handler is None:
        logger.warning("%s", error)
        return
    handler(error)


def _walk(
    path: str,
    pattern: str,
    recursive: bool,
    handler: ExceptionHandler | None,
    lister: DirectoryLister,
    *,
    directories: bool,
) -> Iterator[str]:
    try:
        if directories:
            matched = list(lister.list_directories(path, pattern))
        else:
            matched = list(lister.list_files(path, pattern))
        subdirectories = (
            list(lister.list_directories(path, _ALL_ENTRIES)) if recursive else []
        )
    except OSError as e:
        _report(path, e, handler)
        return

    yield from matched
    for subdirectory in subdirectories:
        yield from _walk(
            subdirectory, pattern, recursive, handler, lister, directories=directories
        )


def enumerate_files(
    path: str,
    pattern: str = _ALL_ENTRIES,
    recursive: bool = True,
    exception_handler: ExceptionHandler | None = None,
    *,
    lister: DirectoryLister | None = None,
) -> Iterator[str]:
    """pattern にマッチするファイルを遅延列挙する。

    Args:
        path: 起点ディレクトリ。
        pattern: エントリ名に適用するファイル指定パターン。
        recursive: サブディレクトリも列挙するか。
        exception_handler: 列挙失敗の報告先。None の場合はログ出力のみ。
        lister: DirectoryLister。None の場合は LocalFileSystem。

    Yields:
        マッチしたファイルのフルパス（ディレクトリごとに親→子の順）。
    """
    return _walk(
        path,
        pattern,
        recursive,
        exception_handler,
        lister if lister is not None else LocalFileSystem(),
        directories=False,
    )


def enumerate_directories(
    path: str,
    pattern: str = _ALL_ENTRIES,
    recursive: bool = True,
    exception_handler: ExceptionHandler | None = None,
    *,
    lister: DirectoryLister | None = None,
) -> Iterator[str]:
    """pattern にマッチするディレクトリを遅延列挙する。引数は enumerate_files() と同じ。"""
    return _walk(
        path,
        pattern,
        recursive,
        exception_handler,
        lister if lister is not None else LocalFileSystem(),
        directories=True,
    )


def get_files(
    path: str,
    pattern: str = _ALL_ENTRIES,
    recursive: bool = True,
    exception_handler: ExceptionHandler | None = None,
    *,
    lister: DirectoryLister | None = None,
) -> list[str]:
    """enumerate_files() の結果をリストで返す。"""
    return list(enumerate_files(path, pattern, recursive, exception_handler, lister=lister))


def get_directories(
    path: str,
    pattern: str = _ALL_ENTRIES,
    recursive: bool = True,
    exception_handler: ExceptionHandler | None = None,
    *,
    lister: DirectoryLister | None = None,
) -> list[str]:
    """enumerate_directories() の結果をリストで返す。"""
    return list(
        enumerate_directories(path, pattern, recursive, exception_handler, lister=lister)
    )


def get_file_list(
    path: str,
    exception_handler: ExceptionHandler | None = None,
    *,
    lister: DirectoryLister | None = None,
    flavor: PathFlavor = HOST,
) -> list[str]:
    """ディレクトリとパターンを連結した形式のパスからファイル一覧を取得する。

    ファイル名部分をパターンとして使い、空なら全ファイルを対象にする。
    最後のディレクトリ名が "*" の場合（例: "logs/*/*.txt"）はサブディレクトリも
    列挙し、"*" はディレクトリから取り除く。

    Args:
        path: ディレクトリとファイル指定パターンを連結したパス。
        exception_handler: 列挙失敗の報告先。
        lister: DirectoryLister。None の場合は LocalFileSystem。
        flavor: パス文字表。

    Returns:
        マッチしたファイルのフルパスのリスト。
    """
    file_pattern = get_file_name(path, flavor=flavor)
    if file_pattern == path:
        # ディレクトリ部分が無いパターンはカレントディレクトリを対象にする
        directory = "." + flavor.separator
    else:
        directory = get_directory_name(path, flavor=flavor)
    file_pattern = file_pattern or _ALL_ENTRIES
    recursive = False

    if get_last_directory_name(directory, flavor=flavor) == _RECURSIVE_MARKER:
        recursive = True
        directory = directory[: directory.rindex(_RECURSIVE_MARKER)]
        directory = directory or "." + flavor.separator

    return get_files(directory, file_pattern, recursive, exception_handler, lister=lister)
