"""get_unique_file_path() のテスト。"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from michi.paths import POSIX, WINDOWS, get_unique_file_path
from tests.unit.conftest import StubFileSystem


class TestFreeBasePath:
    """基準パスが存在しない場合。"""

    def test_returns_input_unchanged(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system()
        assert get_unique_file_path("dir/a.txt", file_system=fs, flavor=POSIX) == (
            "dir/a.txt"
        )

    def test_single_existence_check(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system()
        get_unique_file_path("a.txt", file_system=fs, flavor=POSIX)
        assert fs.checked == ["a.txt"]


class TestCandidateNaming:
    """"name (n).ext" 形式の候補名を検証する。"""

    def test_first_candidate(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system(files=["docs/report.txt"])
        assert get_unique_file_path("docs/report.txt", file_system=fs, flavor=POSIX) == (
            "docs/report (1).txt"
        )

    def test_no_extension(self, make_file_system: Callable[..., StubFileSystem]) -> None:
        fs = make_file_system(files=["README"])
        assert get_unique_file_path("README", file_system=fs, flavor=POSIX) == (
            "README (1)"
        )

    def test_last_dot_is_extension(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system(files=["a.tar.gz"])
        assert get_unique_file_path("a.tar.gz", file_system=fs, flavor=POSIX) == (
            "a.tar (1).gz"
        )

    def test_windows_directory_kept(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system(files=["C:\\data\\a.txt"])
        assert get_unique_file_path("C:\\data\\a.txt", file_system=fs, flavor=WINDOWS) == (
            "C:\\data\\a (1).txt"
        )

    def test_windows_drive_relative_path_keeps_drive(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system(files=["C:foo.txt"])
        assert get_unique_file_path("C:foo.txt", file_system=fs, flavor=WINDOWS) == (
            "C:foo (1).txt"
        )


class TestSearch:
    """指数探索と二分探索の組み合わせを検証する。"""

    def test_fills_next_index(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        fs = make_file_system(files=["base.ext", "base (1).ext", "base (2).ext"])
        assert get_unique_file_path("base.ext", file_system=fs, flavor=POSIX) == (
            "base (3).ext"
        )

    def test_gap_below_existing_is_not_reused(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        """(3) が欠番でも (4) が存在すれば (5) を返す。"""
        fs = make_file_system(
            files=["base.ext", "base (1).ext", "base (2).ext", "base (4).ext"]
        )
        assert get_unique_file_path("base.ext", file_system=fs, flavor=POSIX) == (
            "base (5).ext"
        )

    def test_logarithmic_number_of_checks(
        self, make_file_system: Callable[..., StubFileSystem]
    ) -> None:
        files = ["base.ext"] + [f"base ({n}).ext" for n in range(1, 101)]
        fs = make_file_system(files=files)
        assert get_unique_file_path("base.ext", file_system=fs, flavor=POSIX) == (
            "base (101).ext"
        )
        assert len(fs.checked) < 25

    @pytest.mark.parametrize("count", [1, 2, 3, 7, 8, 9, 31, 64, 65])
    def test_contiguous_run(
        self, make_file_system: Callable[..., StubFileSystem], count: int
    ) -> None:
        """base と (1)..(count) が存在すれば (count + 1) を返す。"""
        files = ["f.txt"] + [f"f ({n}).txt" for n in range(1, count + 1)]
        fs = make_file_system(files=files)
        assert get_unique_file_path("f.txt", file_system=fs, flavor=POSIX) == (
            f"f ({count + 1}).txt"
        )

    def test_logs_resolved_index(
        self,
        make_file_system: Callable[..., StubFileSystem],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        fs = make_file_system(files=["a.txt"])
        with caplog.at_level(logging.DEBUG, logger="michi.paths._unique"):
            get_unique_file_path("a.txt", file_system=fs, flavor=POSIX)
        assert "resolved to index 1" in caplog.text
