"""ファイルシステム協調者のプロトコル定義。

パス操作コアはファイルシステムに直接触れず、以下の狭い能力インターフェースを
介して存在確認・列挙を行う。本番では LocalFileSystem、テストでは
存在パス集合を持つインメモリのスタブを渡す。
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class FileSystem(Protocol):
    """存在確認の能力。"""

    def file_exists(self, path: str) -> bool:
        """path が通常ファイルとして存在するか。"""
        ...

    def directory_exists(self, path: str) -> bool:
        """path がディレクトリとして存在するか。"""
        ...


class DirectoryLister(Protocol):
    """単一ディレクトリ直下の列挙の能力。

    いずれのメソッドも pattern（ファイル指定パターン）にエントリ名が
    マッチしたもののフルパスを返す。アクセスできない場合は OSError を送出する。
    """

    def list_files(self, path: str, pattern: str) -> Iterable[str]:
        ...

    def list_directories(self, path: str, pattern: str) -> Iterable[str]:
        ...
