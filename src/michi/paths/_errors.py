"""パス操作のエラー定義。

いずれもプログラミングエラー（呼び出し側の不正な入力）を表し、
呼び出し元へ即座に送出される。
"""

from __future__ import annotations


class InvalidPathArgumentError(ValueError):
    """空・空白のみのパスが渡された場合のエラー。

    Attributes:
        argument: 不正だった引数名。
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{message} (argument: {argument})")
        self.argument = argument


class InvalidPathCharactersError(ValueError):
    """パスとして不正な文字を含む場合のエラー。

    Attributes:
        path: 検証対象のパス。
        invalid_chars: 検出された不正文字（出現順・重複なし）。
    """

    def __init__(self, path: str, invalid_chars: tuple[str, ...]) -> None:
        shown = ", ".join(repr(c) for c in invalid_chars)
        super().__init__(f"Path has invalid characters: {shown}")
        self.path = path
        self.invalid_chars = invalid_chars
