"""ファイルシステム協調者とディレクトリ列挙。"""

from michi.fs._interfaces import DirectoryLister, FileSystem
from michi.fs._local import LocalFileSystem, get_file_length
from michi.fs._walker import (
    EnumerationError,
    ExceptionHandler,
    enumerate_directories,
    enumerate_files,
    get_directories,
    get_file_list,
    get_files,
)

__all__ = [
    "DirectoryLister",
    "EnumerationError",
    "ExceptionHandler",
    "FileSystem",
    "LocalFileSystem",
    "enumerate_directories",
    "enumerate_files",
    "get_directories",
    "get_file_length",
    "get_file_list",
    "get_files",
]
