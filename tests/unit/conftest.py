"""ユニットテスト共通フィクスチャ。"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

import pytest

from michi.paths import POSIX
from michi.pattern import get_matcher


class StubFileSystem:
    """存在パス集合を固定で持つインメモリの FileSystem。

    ディレクトリは末尾の区切り文字を除いた形で照合する。
    file_exists() の呼び出しは checked に記録される。
    """

    def __init__(
        self, files: Iterable[str] = (), directories: Iterable[str] = ()
    ) -> None:
        self.files = set(files)
        self.directories = {d.rstrip("/\\") for d in directories}
        self.checked: list[str] = []

    def file_exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.files

    def directory_exists(self, path: str) -> bool:
        return path.rstrip("/\\") in self.directories


class StubLister:
    """ディレクトリ → (ファイル名, サブディレクトリ名) の対応を持つ DirectoryLister。

    POSIX 形式のパスのみ扱う。failing に含まれるディレクトリの列挙は
    PermissionError を送出する。listed には列挙したディレクトリが記録される。
    """

    def __init__(
        self,
        tree: Mapping[str, tuple[Iterable[str], Iterable[str]]],
        failing: Iterable[str] = (),
    ) -> None:
        self.tree = {
            key.rstrip("/"): (sorted(files), sorted(dirs))
            for key, (files, dirs) in tree.items()
        }
        self.failing = {f.rstrip("/") for f in failing}
        self.listed: list[str] = []

    def _entries(self, path: str, pattern: str, index: int) -> list[str]:
        key = path.rstrip("/")
        self.listed.append(key)
        if key in self.failing:
            raise PermissionError(13, "Permission denied", path)
        matcher = get_matcher(pattern, flavor=POSIX)
        names = self.tree.get(key, ((), ()))[index]
        prefix = path if path.endswith("/") else path + "/"
        return [prefix + name for name in names if matcher.matches(name)]

    def list_files(self, path: str, pattern: str) -> list[str]:
        return self._entries(path, pattern, 0)

    def list_directories(self, path: str, pattern: str) -> list[str]:
        return self._entries(path, pattern, 1)


@pytest.fixture
def make_file_system() -> Callable[..., StubFileSystem]:
    """StubFileSystem のファクトリ。"""

    def _make(
        files: Iterable[str] = (), directories: Iterable[str] = ()
    ) -> StubFileSystem:
        return StubFileSystem(files, directories)

    return _make
