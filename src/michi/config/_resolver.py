"""設定の解決。

優先度の低い順に以下のレイヤーを項目単位で重ね、MichiConfig を構築する::

    ユーザー設定 < pyproject.toml [tool.michi] < .michi/config.toml < CLI

存在しないファイルのレイヤーは空として扱う。CLI の None は未指定を表す。
"""

from __future__ import annotations

import logging
from pathlib import Path

from michi.config._loader import load_optional_config, load_pyproject_config
from michi.config._locator import (
    find_config_file,
    find_pyproject_toml,
    get_user_config_path,
)
from michi.models.config import MichiConfig

logger = logging.getLogger(__name__)

ConfigLayer = dict[str, object]


def merge_config_layers(*layers: ConfigLayer | None) -> ConfigLayer:
    """後のレイヤーほど優先してマージする。None は読み飛ばす。入力は変更しない。"""
    return {key: value for layer in layers if layer for key, value in layer.items()}


def filter_cli_overrides(cli_options: ConfigLayer) -> ConfigLayer:
    """値が None の CLI オプションを除外する。"""
    return {key: value for key, value in cli_options.items() if value is not None}


def _file_layers(start: Path) -> list[ConfigLayer | None]:
    pyproject_path = find_pyproject_toml(start)
    project_config_path = find_config_file(start)
    return [
        load_optional_config(get_user_config_path()),
        load_pyproject_config(pyproject_path) if pyproject_path else None,
        load_optional_config(project_config_path) if project_config_path else None,
    ]


def resolve_config(
    start_dir: Path | None = None,
    cli_overrides: ConfigLayer | None = None,
) -> MichiConfig:
    """設定ファイルと CLI オプションから MichiConfig を構築する。

    Args:
        start_dir: 設定ファイルの探索開始ディレクトリ。None はカレントディレクトリ。
        cli_overrides: CLI オプションの辞書。

    Raises:
        pydantic.ValidationError: マージ結果が不正な場合。
        tomllib.TOMLDecodeError: 設定ファイルの TOML 構文が不正な場合。
        PermissionError: 設定ファイルの読み取り権限がない場合。
    """
    start = start_dir if start_dir is not None else Path.cwd()
    merged = merge_config_layers(
        *_file_layers(start), filter_cli_overrides(cli_overrides or {})
    )
    logger.debug("Resolved config keys from %s: %s", start, sorted(merged))
    return MichiConfig.model_validate(merged)
