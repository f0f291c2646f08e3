"""michi コマンドラインインターフェース。"""

from michi.cli._app import app, main

__all__ = ["app", "main"]
