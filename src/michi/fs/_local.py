"""LocalFileSystem — ローカルファイルシステムのアダプター。"""

from __future__ import annotations

import os

from michi.paths import HOST, PathFlavor, join_path
from michi.pattern import get_matcher


class LocalFileSystem:
    """FileSystem / DirectoryLister の本番実装。

    エントリ名の絞り込みにはホストの glob ではなく michi.pattern を使う。
    """

    def __init__(self, *, ignore_case: bool = False, flavor: PathFlavor = HOST) -> None:
        self._ignore_case = ignore_case
        self._flavor = flavor

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def directory_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def _list(self, path: str, pattern: str, *, directories: bool) -> list[str]:
        matcher = get_matcher(pattern, self._ignore_case, flavor=self._flavor)
        with os.scandir(path) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if (entry.is_dir() if directories else entry.is_file())
                and matcher.matches(entry.name)
            )
        return [join_path(path, name, flavor=self._flavor) for name in names]

    def list_files(self, path: str, pattern: str) -> list[str]:
        """path 直下の pattern にマッチするファイルを名前順で返す。

        Raises:
            OSError: ディレクトリを開けない場合。
        """
        return self._list(path, pattern, directories=False)

    def list_directories(self, path: str, pattern: str) -> list[str]:
        """path 直下の pattern にマッチするディレクトリを名前順で返す。

        Raises:
            OSError: ディレクトリを開けない場合。
        """
        return self._list(path, pattern, directories=True)


def get_file_length(file_name: str) -> int:
    """ファイルサイズ（バイト）を返す。存在しない・読めない場合は -1。

    投機的に呼ばれることを想定し、失敗は例外ではなく番兵値で返す。
    """
    try:
        if not os.path.isfile(file_name):
            return -1
        return os.path.getsize(file_name)
    except (OSError, ValueError):
        return -1
