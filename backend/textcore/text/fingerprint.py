"""
コンテンツのフィンガープリント（変更検知・重複排除用のハッシュ）
"""
import hashlib
from typing import Optional

from textcore.core.errors import raise_undefined_input
from textcore.core.settings import settings


def fingerprint(content: Optional[str], algorithm: Optional[str] = None) -> str:
    """
    コンテンツのハッシュ（16進文字列）を計算する

    - UTF-8 でエンコードしたバイト列をハッシュ化
    - 空文字列は「空バイト列のハッシュ」を返す（エラーにしない）
    - None は UNDEFINED_INPUT エラー

    Args:
        content: ハッシュ対象テキスト
        algorithm: hashlib のアルゴリズム名（未指定なら settings.fingerprint_algorithm）

    Returns:
        16進ダイジェスト文字列

    Raises:
        AppError: content が None の場合（UNDEFINED_INPUT）
    """
    if content is None:
        raise_undefined_input("フィンガープリント対象のコンテンツがありません（None）")

    hasher = hashlib.new(algorithm or settings.fingerprint_algorithm)
    hasher.update(content.encode("utf-8"))
    return hasher.hexdigest()

