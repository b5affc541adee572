"""
テキスト正規化（文字種判定 + クリーニング）

【初心者向け】
- アラビア文字を1文字でも含むテキストは "arabic"、それ以外は "other" として扱う
- arabic: ハラカート（母音記号）を除去 → アラビア文字と空白以外を除去
- other: 英数字と空白以外を除去 → 連続空白を1つに
- どちらも最後に小文字化 + 前後の空白を削除
- TF-IDF のトークン化もここの tokenize() を使うので、スコアの基準が揃う
"""
import re
from typing import List, Literal, Optional

# 文字種（2種類だけ）
Script = Literal["arabic", "other"]

# アラビア文字の範囲（Arabic / Supplement / Extended-A / Presentation Forms A・B）
# FEFF（BOM）は含めない
_ARABIC_RANGES = (
    "\u0600-\u06ff"
    "\u0750-\u077f"
    "\u08a0-\u08ff"
    "\ufb50-\ufdff"
    "\ufe70-\ufefc"
)
# 範囲内だがアラビア文字ではない文字（句読点・タトウィール・結合記号など）
_NOT_ARABIC_SCRIPT = (
    "\u060c\u061b\u061c\u061f"  # 読点・セミコロン・ALM・疑問符
    "\u0640"  # タトウィール
    "\u064b-\u0655\u0670"  # 結合記号
    "\u06dd\u08e2"  # アーヤ終端記号
    "\ufd3e\ufd3f"  # 装飾括弧
)
_ARABIC_CHAR = re.compile(f"(?![{_NOT_ARABIC_SCRIPT}])[{_ARABIC_RANGES}]")
_NON_ARABIC = re.compile(f"[^{_ARABIC_RANGES}\\s]|[{_NOT_ARABIC_SCRIPT}]")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE = re.compile(r"\s+")

# ハラカート（除去対象の結合記号）
HARAKAT = frozenset(
    (
        "\u064b",  # fathatan
        "\u064c",  # dammatan
        "\u064d",  # kasratan
        "\u064e",  # fatha
        "\u064f",  # damma
        "\u0650",  # kasra
        "\u0651",  # shadda
        "\u0652",  # sukun
    )
)


def detect_script(text: Optional[str]) -> Script:
    """
    テキストの文字種を判定する

    Args:
        text: 判定対象テキスト（None / 空 / 空白のみは "other"）

    Returns:
        "arabic" または "other"
    """
    if not text or not text.strip():
        return "other"
    if _ARABIC_CHAR.search(text):
        return "arabic"
    return "other"


def remove_harakat(text: str) -> str:
    """ハラカート（母音記号）を除去する"""
    return "".join(ch for ch in text if ch not in HARAKAT)


def remove_non_arabic(text: str) -> str:
    """アラビア文字と空白以外の文字を除去する"""
    return _NON_ARABIC.sub("", text)


def normalize(text: Optional[str]) -> Optional[str]:
    """
    テキストを正規化する

    - None はそのまま返す（例外は出さない）
    - 空文字列・空白のみはそのまま返す
    - arabic: ハラカート除去 → アラビア文字と空白以外を除去
    - other: 英数字と空白以外を除去 → 連続空白を1つに
    - 最後に小文字化 + strip

    Args:
        text: 元のテキスト

    Returns:
        正規化されたテキスト
    """
    if text is None or not text.strip():
        return text

    if detect_script(text) == "arabic":
        normalized = remove_harakat(text)
        normalized = remove_non_arabic(normalized)
    else:
        normalized = _NON_ALNUM.sub("", text)
        normalized = _WHITESPACE.sub(" ", normalized)

    return normalized.lower().strip()


def tokenize(text: Optional[str]) -> List[str]:
    """
    正規化したテキストを空白で分割してトークン列にする

    Args:
        text: 元のテキスト

    Returns:
        トークンのリスト（長さ0のトークンは含まない）
    """
    normalized = normalize(text)
    if not normalized:
        return []
    # split() は連続空白・改行も区切りとして扱い、空トークンを返さない
    return normalized.split()
