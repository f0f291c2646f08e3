"""FileLister — find サブコマンドのファイル列挙。

ディレクトリを走査し、各ファイルの名前または起点からの相対パスにファイル指定パターンを適用する。
列挙に失敗したサブディレクトリは警告として収集し、走査は継続する。
"""

from __future__ import annotations

from typing import Annotated, NamedTuple

from pydantic import Field

from michi.fs import DirectoryLister, EnumerationError, LocalFileSystem, enumerate_files
from michi.models._base import MichiBaseModel
from michi.paths import HOST, PathFlavor, add_path_suffix, get_file_name
from michi.pattern import is_file_pattern_match


class ListedFiles(MichiBaseModel):
    """ファイル列挙結果。

    list_files() が構築する。paths は以下の不変条件を持つ:
    - 全要素が起点ディレクトリを前置したパス
    - 走査順（ディレクトリごとに名前順、親→子）

    Attributes:
        paths: パターンにマッチしたファイルパス。
        warnings: 列挙に失敗したディレクトリの警告メッセージ。
    """

    paths: tuple[Annotated[str, Field(min_length=1)], ...] = ()
    warnings: tuple[str, ...] = ()


class _SpecsByScope(NamedTuple):
    """区切り文字を含まないパターン（名前用）と含むパターン（相対パス用）。"""

    name_specs: tuple[str, ...]
    path_specs: tuple[str, ...]

    @classmethod
    def split(cls, specs: tuple[str, ...], flavor: PathFlavor) -> _SpecsByScope:
        def has_separator(spec: str) -> bool:
            return any(flavor.is_separator(c) for c in spec)

        return cls(
            name_specs=tuple(s for s in specs if not has_separator(s)),
            path_specs=tuple(s for s in specs if has_separator(s)),
        )

    def matches(
        self, relative: str, name: str, ignore_case: bool, flavor: PathFlavor
    ) -> bool:
        return is_file_pattern_match(
            self.name_specs, name, ignore_case, flavor=flavor
        ) or is_file_pattern_match(self.path_specs, relative, ignore_case, flavor=flavor)


class FileListingError(Exception):
    """ファイル列挙エラー。

    起点ディレクトリが存在しない場合等。
    エラーメッセージは解決方法のヒントを含む。
    """


def list_files(
    directory: str,
    patterns: tuple[str, ...],
    *,
    exclude: tuple[str, ...] = (),
    recursive: bool = True,
    ignore_case: bool = False,
    flavor: PathFlavor = HOST,
    lister: DirectoryLister | None = None,
) -> ListedFiles:
    """directory 以下のファイルのうち patterns のいずれかにマッチするものを列挙する。

    区切り文字を含まないパターン（例: "*.py"）はファイル名に、含むパターン
    （例: "src/*.py", "**/test_*"）は起点からの相対パスに適用する。
    そのため recursive の場合は "*.py" でもサブディレクトリのファイルにマッチする。

    Args:
        directory: 起点ディレクトリ。
        patterns: 対象とするファイル指定パターン。
        exclude: 除外するファイル指定パターン。
        recursive: サブディレクトリも走査するか。
        ignore_case: 大文字小文字を区別しないか。
        flavor: パス文字表。
        lister: DirectoryLister。None の場合は LocalFileSystem。

    Returns:
        マッチしたファイルと警告。マッチ 0 件でも ListedFiles を返す。

    Raises:
        FileListingError: 起点ディレクトリが存在しない場合。
        OSError: 起点ディレクトリ自体を列挙できない場合。
    """
    file_system = LocalFileSystem(ignore_case=ignore_case, flavor=flavor)
    effective_lister = lister if lister is not None else file_system
    if lister is None and not file_system.directory_exists(directory):
        raise FileListingError(
            f"Directory not found: '{directory}'. "
            "Check the directory path and try again."
        )

    warnings: list[str] = []

    def _on_error(error: EnumerationError) -> None:
        if error.path == directory:
            raise error.cause
        warnings.append(f"Skipping unreadable directory: {error.path} ({error.cause})")

    include_specs = _SpecsByScope.split(patterns, flavor)
    exclude_specs = _SpecsByScope.split(exclude, flavor)
    prefix_length = len(add_path_suffix(directory, flavor=flavor))
    matched: list[str] = []
    for file_path in enumerate_files(
        directory, "*", recursive, _on_error, lister=effective_lister
    ):
        relative = file_path[prefix_length:]
        name = get_file_name(relative, flavor=flavor)
        if not include_specs.matches(relative, name, ignore_case, flavor):
            continue
        if exclude_specs.matches(relative, name, ignore_case, flavor):
            continue
        matched.append(file_path)

    return ListedFiles(paths=tuple(matched), warnings=tuple(warnings))
