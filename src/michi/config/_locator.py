"""設定ファイルの探索。

プロジェクト設定（.michi/config.toml）と pyproject.toml は探索開始
ディレクトリから親方向へ、ユーザー設定は XDG 規約の位置を参照する。
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

PROJECT_DIR_NAME: str = ".michi"
CONFIG_FILE_NAME: str = "config.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
_XDG_CONFIG_HOME_ENV: str = "XDG_CONFIG_HOME"


def _self_and_ancestors(start: Path) -> Iterator[Path]:
    resolved = start.resolve()
    yield resolved
    yield from resolved.parents


def _nearest(start: Path, name: str, *, directory: bool) -> Path | None:
    """start に最も近い祖先にある name を返す。種別が異なるエントリは無視する。

    Raises:
        OSError: 探索パス上のアクセス権限エラー等。
    """
    for parent in _self_and_ancestors(start):
        candidate = parent / name
        found = candidate.is_dir() if directory else candidate.is_file()
        if found:
            return candidate
    return None


def find_project_root(start: Path) -> Path | None:
    """.michi/ ディレクトリを含む最も近い祖先ディレクトリを返す。"""
    project_dir = _nearest(start, PROJECT_DIR_NAME, directory=True)
    return None if project_dir is None else project_dir.parent


def find_config_file(start: Path) -> Path | None:
    """プロジェクト設定ファイルのパスを返す。

    ファイル自体の存在は確認しない。プロジェクトルートが無ければ None。
    """
    project_root = find_project_root(start)
    if project_root is None:
        return None
    return project_root / PROJECT_DIR_NAME / CONFIG_FILE_NAME


def find_pyproject_toml(start: Path) -> Path | None:
    """最も近い pyproject.toml を返す。"""
    return _nearest(start, PYPROJECT_FILE_NAME, directory=False)


def get_user_config_path() -> Path:
    """ユーザー設定ファイルのパス（存在チェックなし）。

    $XDG_CONFIG_HOME が設定されていればその下、なければ ~/.config の下の
    michi/config.toml。

    Raises:
        RuntimeError: ホームディレクトリを特定できない場合。
    """
    config_home = os.environ.get(_XDG_CONFIG_HOME_ENV)
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "michi" / CONFIG_FILE_NAME
