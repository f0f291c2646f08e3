"""プロセス終了コード。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """CLI の終了コード。2 は使用しない。"""

    SUCCESS = 0  # マッチあり・処理成功
    NO_MATCH = 1  # マッチなし
    EXECUTION_ERROR = 3  # 実行時のファイルシステムエラー
    INPUT_ERROR = 4  # 引数・設定の不正
