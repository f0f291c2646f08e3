"""パス名・ファイル名の検証と置換。"""

from __future__ import annotations

from michi.paths._errors import InvalidPathArgumentError, InvalidPathCharactersError
from michi.paths._flavor import HOST, PathFlavor
from michi.paths._normalizer import _parent_directory, get_file_name


def _find_chars(text: str, chars: frozenset[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(c for c in text if c in chars))


def validate_path_name(file_path: str | None, *, flavor: PathFlavor = HOST) -> None:
    """パス名を検証する。

    Raises:
        InvalidPathArgumentError: None・空・空白のみの場合。
        InvalidPathCharactersError: パスとして不正な文字を含む場合。
    """
    if file_path is None or not file_path.strip():
        raise InvalidPathArgumentError(
            "file_path", "Path cannot be null or empty space"
        )

    invalid = _find_chars(file_path, flavor.invalid_path_chars)
    if invalid:
        raise InvalidPathCharactersError(file_path, invalid)


def is_valid_file_name(file_path: str | None, *, flavor: PathFlavor = HOST) -> bool:
    """ファイル名（ディレクトリ部分を含むパス）として有効か判定する。

    末尾要素をファイル名文字集合で、ディレクトリ部分をパス文字集合で検査し、
    ディレクトリの各要素に対して再帰的に同じ検査を行う。ルートは検査しない。
    """
    if file_path is None or not file_path.strip():
        return False

    directory = _parent_directory(file_path, flavor) or ""
    file_name = get_file_name(file_path, flavor=flavor)

    has_directory = bool(directory.strip())

    if has_directory and _find_chars(directory, flavor.invalid_path_chars):
        return False

    if not file_name.strip() or _find_chars(file_name, flavor.invalid_file_name_chars):
        return False

    # ルートに到達するまで各ディレクトリ要素を検査する
    if has_directory and get_file_name(directory, flavor=flavor).strip():
        return is_valid_file_name(directory, flavor=flavor)

    return True


def get_valid_file_name(
    file_name: str, replace_with: str = "_", *, flavor: PathFlavor = HOST
) -> str:
    """不正なファイル名文字を replace_with で置換する。空文字列なら除去する。"""
    return "".join(
        replace_with if c in flavor.invalid_file_name_chars else c for c in file_name
    )


def get_valid_file_path(
    file_path: str, replace_with: str = "_", *, flavor: PathFlavor = HOST
) -> str:
    """パスの各要素に get_valid_file_name() を適用し、プライマリ区切り文字で連結する。

    先頭要素がボリューム指定（"C:" 等）の場合はそのまま残す。
    """
    parts = [file_path]
    for sep in flavor.separators:
        parts = [piece for part in parts for piece in part.split(sep)]

    volume_sep = flavor.volume_separator
    result: list[str] = []
    for i, part in enumerate(parts):
        if (
            i == 0
            and volume_sep not in flavor.separators
            and part.find(volume_sep) > 0
        ):
            result.append(part)
            continue
        result.append(get_valid_file_name(part, replace_with, flavor=flavor))

    return flavor.separator.join(result)
