"""TOML 設定ファイルの読み込み。

構文エラー・権限エラーは呼び出し側へ送出する。値の検証は行わない。
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

# pyproject.toml 内で michi の設定を持つテーブルのキー経路
_PYPROJECT_TABLE: tuple[str, ...] = ("tool", "michi")


def load_toml_config(path: Path) -> dict[str, object]:
    """TOML ファイルを辞書として読み込む。

    Raises:
        FileNotFoundError: ファイルが存在しない場合。
        PermissionError: 読み取り権限がない場合。
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
    """
    with path.open("rb") as f:
        return tomllib.load(f)


def load_optional_config(path: Path) -> dict[str, object] | None:
    """load_toml_config() と同じだが、ファイルが無ければ None を返す。"""
    try:
        return load_toml_config(path)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return None


def load_pyproject_config(path: Path) -> dict[str, object] | None:
    """pyproject.toml の [tool.michi] テーブルを返す。テーブルが無ければ None。

    Raises:
        FileNotFoundError: ファイルが存在しない場合。
        PermissionError: 読み取り権限がない場合。
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
    """
    table: object = load_toml_config(path)
    for key in _PYPROJECT_TABLE:
        if not isinstance(table, dict):
            return None
        table = table.get(key)
    return table if isinstance(table, dict) else None
