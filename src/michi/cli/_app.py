"""CliApp — Typer アプリケーション定義。

サブコマンド:
    match   パスがファイル指定パターンにマッチするか判定する。
    regex   ファイル指定パターンの変換結果（正規表現）を表示する。
    find    ディレクトリ以下のマッチするファイルを列挙する。
    unique  既存ファイルと衝突しないパスを表示する。
    trim    表示幅に合わせて短縮したパスを表示する。
    lastdir 最後のディレクトリ名を表示する。
    check   パス名に不正な文字が無いか検証する。

結果は stdout、エラー・警告は stderr に出力する。
"""

from __future__ import annotations

import importlib.metadata
import os
import sys
import tomllib
from typing import Annotated

import typer
from pydantic import ValidationError

from michi.cli._file_lister import FileListingError, list_files
from michi.config import resolve_config
from michi.fs import LocalFileSystem
from michi.models.config import MichiConfig
from michi.models.exit_code import ExitCode
from michi.paths import (
    InvalidPathArgumentError,
    InvalidPathCharactersError,
    PathFlavor,
    PathStyle,
    flavor_for_style,
    get_absolute_path,
    get_last_directory_name,
    get_unique_file_path,
    trim_file_name,
    validate_path_name,
)
from michi.pattern import compile_file_pattern, is_file_pattern_match

_STYLE_KEY = "path_style"

app = typer.Typer(
    name="michi",
    help="Shell-style file specification matching and path utilities.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("michi"))
        raise typer.Exit()


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


@app.callback()
def michi_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    style: Annotated[
        PathStyle | None,
        typer.Option("--style", help="Path style: host, posix or windows."),
    ] = None,
) -> None:
    """Shell-style file specification matching and path utilities."""
    obj = ctx.ensure_object(dict)
    obj[_STYLE_KEY] = style


def _load_config(ctx: typer.Context, **overrides: object) -> MichiConfig:
    """設定を解決する。不正な設定は終了コード 4 で終了する。"""
    obj = ctx.ensure_object(dict)
    cli_overrides: dict[str, object] = {_STYLE_KEY: obj.get(_STYLE_KEY), **overrides}
    try:
        return resolve_config(cli_overrides=cli_overrides)
    except (ValidationError, tomllib.TOMLDecodeError) as e:
        print(
            f"Error: Invalid configuration: {e}\n"
            "Check .michi/config.toml for syntax errors or invalid values.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except PermissionError as e:
        print(
            f"Error: Cannot read configuration file: {e}\n"
            "Check file permissions for .michi/config.toml.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None


def _flavor(config: MichiConfig) -> PathFlavor:
    return flavor_for_style(config.path_style)


def _base_directory(config: MichiConfig) -> str:
    return config.base_directory if config.base_directory is not None else os.getcwd()


@app.command()
def match(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to test.")],
    specs: Annotated[list[str], typer.Argument(help="File specifications.")],
    ignore_case: Annotated[
        bool | None,
        typer.Option("--ignore-case/--case-sensitive", help="Case-insensitive match."),
    ] = None,
) -> None:
    """Exit 0 when PATH matches any SPEC, 1 otherwise."""
    config = _load_config(ctx, ignore_case=ignore_case)
    matched = is_file_pattern_match(
        specs, path, config.ignore_case, flavor=_flavor(config)
    )
    if matched:
        print(path)
        raise typer.Exit(code=ExitCode.SUCCESS)
    raise typer.Exit(code=ExitCode.NO_MATCH)


@app.command()
def regex(
    ctx: typer.Context,
    spec: Annotated[str, typer.Argument(help="File specification.")],
) -> None:
    """Print the regular expression a file specification compiles to."""
    config = _load_config(ctx)
    print(compile_file_pattern(spec, flavor=_flavor(config)))


@app.command()
def find(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to search.")] = ".",
    patterns: Annotated[
        list[str] | None,
        typer.Option("--pattern", "-p", help="File specification (repeatable)."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="File specification to skip (repeatable)."),
    ] = None,
    recursive: Annotated[
        bool | None,
        typer.Option("--recursive/--no-recursive", help="Search subdirectories."),
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option("--ignore-case/--case-sensitive", help="Case-insensitive match."),
    ] = None,
) -> None:
    """List files under DIRECTORY matching the given specifications."""
    config = _load_config(
        ctx,
        patterns=tuple(patterns) if patterns else None,
        exclude=tuple(exclude) if exclude else None,
        recursive=recursive,
        ignore_case=ignore_case,
    )

    try:
        listed = list_files(
            directory,
            config.patterns,
            exclude=config.exclude,
            recursive=config.recursive,
            ignore_case=config.ignore_case,
            flavor=_flavor(config),
        )
    except FileListingError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except OSError as e:
        print(f"Error: Cannot read directory: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.EXECUTION_ERROR) from None

    for warning in listed.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if not listed.paths:
        print("No files found matching the specified patterns.", file=sys.stderr)
        raise typer.Exit(code=ExitCode.NO_MATCH)

    for file_path in listed.paths:
        print(file_path)


@app.command()
def unique(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Desired file path.")],
) -> None:
    """Print PATH, or the first free 'name (n).ext' variant if it exists."""
    config = _load_config(ctx)
    flavor = _flavor(config)
    try:
        validate_path_name(path, flavor=flavor)
    except (InvalidPathArgumentError, InvalidPathCharactersError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None

    absolute = get_absolute_path(path, _base_directory(config), flavor=flavor)
    print(get_unique_file_path(absolute, file_system=LocalFileSystem(), flavor=flavor))


@app.command()
def trim(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to shorten.")],
    length: Annotated[
        int | None,
        typer.Option("--length", "-n", help="Maximum display width (minimum 12).", min=1),
    ] = None,
) -> None:
    """Shorten PATH to fit a display width, keeping the file name visible."""
    config = _load_config(ctx, trim_length=length)
    print(
        trim_file_name(
            path,
            config.trim_length,
            file_system=LocalFileSystem(),
            flavor=_flavor(config),
        )
    )


@app.command()
def lastdir(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to inspect.")],
) -> None:
    """Print the last directory name of PATH.

    A final component without a trailing separator is treated as a file name
    unless it names an existing directory.
    """
    config = _load_config(ctx)
    try:
        name = get_last_directory_name(
            path, file_system=LocalFileSystem(), flavor=_flavor(config)
        )
    except InvalidPathArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    print(name)


@app.command()
def check(
    ctx: typer.Context,
    paths: Annotated[list[str], typer.Argument(help="Paths to validate.")],
) -> None:
    """Validate that each PATH contains no characters invalid in a path."""
    config = _load_config(ctx)
    flavor = _flavor(config)
    failed = False
    for path in paths:
        try:
            validate_path_name(path, flavor=flavor)
        except (InvalidPathArgumentError, InvalidPathCharactersError) as e:
            print(f"Error: {path!r}: {e}", file=sys.stderr)
            failed = True
    if failed:
        raise typer.Exit(code=ExitCode.INPUT_ERROR)
