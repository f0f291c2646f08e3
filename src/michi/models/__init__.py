"""michi ドメインモデルパッケージ。"""

from michi.models._base import MichiBaseModel
from michi.models.config import DEFAULT_PATTERNS, DEFAULT_TRIM_LENGTH, MichiConfig
from michi.models.exit_code import ExitCode

__all__ = [
    "DEFAULT_PATTERNS",
    "DEFAULT_TRIM_LENGTH",
    "ExitCode",
    "MichiBaseModel",
    "MichiConfig",
]
