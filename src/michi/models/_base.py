"""ドメインモデル共通の基底クラスと入力正規化。"""

from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict


class MichiBaseModel(BaseModel):
    """未定義フィールドを拒否する不変モデルの基底クラス。"""

    model_config = ConfigDict(extra="forbid", frozen=True)


E = TypeVar("E", bound=StrEnum)


def normalize_enum_value(v: object, enum_cls: type[E]) -> object:
    """文字列を enum_cls のメンバー値に大文字小文字を無視して対応付ける。

    対応するメンバーが無い文字列や str 以外の値はそのまま返し、
    判定は後続の pydantic バリデーションに任せる。
    """
    if not isinstance(v, str):
        return v
    by_folded = {member.value.casefold(): member.value for member in enum_cls}
    return by_folded.get(v.casefold(), v)
