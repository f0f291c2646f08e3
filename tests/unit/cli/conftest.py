"""CLI テスト共通フィクスチャ。"""

from __future__ import annotations

from pathlib import Path

import pytest

PATCH_RESOLVE_CONFIG = "michi.cli._app.resolve_config"
PATCH_USER_CONFIG = "michi.config._resolver.get_user_config_path"


@pytest.fixture(autouse=True)
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """カレントディレクトリとユーザー設定を tmp_path 配下に隔離する。"""
    workspace = tmp_path / "work"
    workspace.mkdir()
    monkeypatch.chdir(workspace)
    monkeypatch.setattr(PATCH_USER_CONFIG, lambda: tmp_path / "user-config.toml")
    return workspace


@pytest.fixture
def workspace(_isolated_workspace: Path) -> Path:
    """テスト用の作業ディレクトリ（カレントディレクトリ）。"""
    return _isolated_workspace


def write_project_config(workspace: Path, content: str) -> Path:
    """workspace に .michi/config.toml を作成し、そのパスを返す。"""
    config_dir = workspace / ".michi"
    config_dir.mkdir(exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path
