"""設定管理モデル。

設定項目の定義とバリデーション。全ソースのマージ結果から構築される。
"""

from __future__ import annotations

from typing import Annotated, Final

from pydantic import Field, StrictBool, StringConstraints, field_validator

from michi.models._base import MichiBaseModel, normalize_enum_value
from michi.paths import PathStyle

DEFAULT_TRIM_LENGTH: Final[int] = 40
DEFAULT_PATTERNS: Final[tuple[str, ...]] = ("*",)

_Pattern = Annotated[str, StringConstraints(min_length=1)]


class MichiConfig(MichiBaseModel):
    """全設定項目を統合した不変モデル。

    デフォルト値のみで有効なインスタンスを構築可能。
    """

    # マッチ設定
    ignore_case: StrictBool = False
    path_style: PathStyle = PathStyle.HOST

    # find サブコマンド設定
    recursive: StrictBool = True
    patterns: tuple[_Pattern, ...] = Field(default=DEFAULT_PATTERNS, min_length=1)
    exclude: tuple[_Pattern, ...] = ()

    # 表示設定
    trim_length: int = Field(default=DEFAULT_TRIM_LENGTH, gt=0)

    # 相対パスの基準ディレクトリ（None の場合はカレントディレクトリ）
    base_directory: str | None = Field(default=None, min_length=1)

    @field_validator("path_style", mode="before")
    @classmethod
    def normalize_path_style(cls, v: object) -> object:
        """path_style を大文字小文字非依存で受け付ける。"""
        return normalize_enum_value(v, PathStyle)
