"""パス名検証・置換のテスト。"""

from __future__ import annotations

import pytest

from michi.paths import (
    POSIX,
    WINDOWS,
    InvalidPathArgumentError,
    InvalidPathCharactersError,
    get_valid_file_name,
    get_valid_file_path,
    is_valid_file_name,
    validate_path_name,
)


class TestValidatePathName:
    """validate_path_name() を検証する。"""

    @pytest.mark.parametrize("path", [None, "", "   "])
    def test_blank_raises_argument_error(self, path: str | None) -> None:
        with pytest.raises(InvalidPathArgumentError) as exc_info:
            validate_path_name(path, flavor=POSIX)
        assert exc_info.value.argument == "file_path"

    def test_posix_nul_rejected(self) -> None:
        with pytest.raises(InvalidPathCharactersError) as exc_info:
            validate_path_name("a\0b\0c", flavor=POSIX)
        assert exc_info.value.invalid_chars == ("\0",)
        assert exc_info.value.path == "a\0b\0c"

    def test_windows_pipe_rejected(self) -> None:
        with pytest.raises(InvalidPathCharactersError, match="invalid characters"):
            validate_path_name("C:\\a|b", flavor=WINDOWS)

    def test_windows_drive_path_accepted(self) -> None:
        validate_path_name("C:\\dir\\file?.txt", flavor=WINDOWS)

    def test_posix_accepts_windows_specials(self) -> None:
        validate_path_name("/a|b/c*d", flavor=POSIX)


class TestIsValidFileName:
    """is_valid_file_name() を検証する。"""

    @pytest.mark.parametrize("path", [None, "", "  "])
    def test_blank_is_invalid(self, path: str | None) -> None:
        assert is_valid_file_name(path, flavor=POSIX) is False

    def test_posix_valid(self) -> None:
        assert is_valid_file_name("/a/b.txt", flavor=POSIX) is True

    def test_relative_valid(self) -> None:
        assert is_valid_file_name("a/b/c.txt", flavor=POSIX) is True

    def test_directory_path_without_name_is_invalid(self) -> None:
        assert is_valid_file_name("/a/", flavor=POSIX) is False

    def test_windows_valid(self) -> None:
        assert is_valid_file_name("C:\\dir\\file.txt", flavor=WINDOWS) is True

    def test_windows_invalid_name_char(self) -> None:
        assert is_valid_file_name("C:\\dir\\file?.txt", flavor=WINDOWS) is False

    def test_windows_invalid_directory_component(self) -> None:
        """ディレクトリ要素もファイル名文字集合で検査される。"""
        assert is_valid_file_name("C:\\di*r\\file.txt", flavor=WINDOWS) is False

    def test_windows_control_char(self) -> None:
        assert is_valid_file_name("a\tb.txt", flavor=WINDOWS) is False


class TestGetValidFileName:
    """get_valid_file_name() を検証する。"""

    def test_replaces_with_underscore(self) -> None:
        assert get_valid_file_name("a:b*c.txt", flavor=WINDOWS) == "a_b_c.txt"

    def test_empty_replacement_removes(self) -> None:
        assert get_valid_file_name("a:b*c.txt", "", flavor=WINDOWS) == "abc.txt"

    def test_posix_separator_replaced(self) -> None:
        assert get_valid_file_name("a/b", flavor=POSIX) == "a_b"

    def test_valid_name_unchanged(self) -> None:
        assert get_valid_file_name("report.txt", flavor=WINDOWS) == "report.txt"


class TestGetValidFilePath:
    """get_valid_file_path() を検証する。"""

    def test_windows_volume_kept(self) -> None:
        assert get_valid_file_path("C:\\my:dir\\fi?le.txt", flavor=WINDOWS) == (
            "C:\\my_dir\\fi_le.txt"
        )

    def test_windows_separators_normalized(self) -> None:
        assert get_valid_file_path("C:/a/b", flavor=WINDOWS) == "C:\\a\\b"

    def test_posix_root_kept(self) -> None:
        assert get_valid_file_path("/a/b\0c", flavor=POSIX) == "/a/b_c"
