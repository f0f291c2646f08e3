"""UniqueNameFinder — 既存ファイルと衝突しないパスの探索。

候補列 base, "base (1)", "base (2)", ... のうち、存在しない最小番号の候補を
指数探索（1, 2, 4, 8, ...）と二分探索の組み合わせで見つける。
存在確認の回数は最終的な番号 n に対して O(log n)。

途中の候補が後から削除されて生じた「穴」は検出しない。
また、確認後に他プロセスが同じパスを作成する競合は防げないため、
アトミックな作成は呼び出し側の責務となる。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from michi.paths._flavor import HOST, PathFlavor
from michi.paths._normalizer import (
    get_extension,
    get_file_name,
    get_file_name_without_extension,
)

if TYPE_CHECKING:
    from michi.fs import FileSystem

logger = logging.getLogger(__name__)


def get_unique_file_path(
    file_path: str,
    *,
    file_system: FileSystem,
    flavor: PathFlavor = HOST,
) -> str:
    """file_path が存在しなければそのまま、存在すれば "name (n).ext" 形式の空きパスを返す。

    Args:
        file_path: 基準となるファイルパス。相対パスのまま扱う（絶対パス化は呼び出し側で行う）。
        file_system: ファイル存在確認に使う FileSystem。
        flavor: パス文字表。

    Returns:
        確認時点で存在しないファイルパス。
    """
    if not file_system.file_exists(file_path):
        return file_path

    # ドライブ相対パス（"C:foo.txt"）のボリューム部分も残す
    directory = file_path[: len(file_path) - len(get_file_name(file_path, flavor=flavor))]
    root = get_file_name_without_extension(file_path, flavor=flavor)
    extension = get_extension(file_path, flavor=flavor)

    def candidate(index: int) -> str:
        return f"{directory}{root} ({index}){extension}"

    # 指数探索: 存在しない候補 k と、その直前に存在した候補 j を求める
    i = j = k = 1
    unique_file_path = file_path
    while file_system.file_exists(unique_file_path):
        unique_file_path = candidate(i)
        j = k
        k = i
        i *= 2

    # 二分探索: [j, k] の範囲で存在しない最小番号を求める
    while j < k:
        i = (j + k) // 2
        if file_system.file_exists(candidate(i)):
            j = i + 1
        else:
            k = i

    logger.debug("Unique path for %s resolved to index %d", file_path, k)
    return candidate(k)
