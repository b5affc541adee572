"""
共通エラーハンドリング（エラー形式の統一）

【初心者向け】
- 呼び出し側が { "error": { "code": "...", "message": "..." } } の形で
  エラー内容を受け取れるよう、共通形式で例外を投げる
- raise_undefined_input / raise_unsupported で、コードを指定して raise する
- 検索や TF-IDF の入力不備は例外にせず空結果/0.0 で返し、
  ストアの失敗は False で返すため、例外になるのはこの2種類だけ
"""
from typing import Literal

# エラーコード一覧（型安全のため Literal で定義）
ErrorCode = Literal[
    "UNDEFINED_INPUT",
    "UNSUPPORTED",
]


class AppError(Exception):
    """アプリケーション共通エラー

    detail には { "error": { "code": "...", "message": "..." } } 形式の
    辞書を保持する（ログ出力や上位レイヤーでの変換用）。
    """

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = {"error": {"code": code, "message": message}}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def raise_undefined_input(message: str) -> None:
    """UNDEFINED_INPUTエラーを発生させる

    None など、結果を定義できない入力を受け取ったときに使う
    """
    raise AppError("UNDEFINED_INPUT", message)


def raise_unsupported(message: str) -> None:
    """UNSUPPORTEDエラーを発生させる"""
    raise AppError("UNSUPPORTED", message)
