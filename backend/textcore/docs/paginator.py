"""
ページ分割モジュール（長文をページ単位に分割）

【初心者向け】
- page_size 文字を上限に、なるべく段落（空行）や改行の位置で切る
- オーバーラップはしない。全ページを連結すると元の本文に完全一致する
  （fingerprint がページ分割の有無で変わらないようにするため）
- 空の本文でも空ページ1枚を返す（ドキュメントは必ず1ページ以上）
"""
from typing import List


def _find_break(window: str) -> int:
    """
    window 内の切れ目（そこまでを1ページにする位置）を探す

    段落区切り → 改行 → 空白 の順に探し、見つからなければ window 全体
    """
    for separator in ("\n\n", "\n", " "):
        pos = window.rfind(separator)
        if pos > 0:
            return pos + len(separator)
    return len(window)


def paginate(content: str, page_size: int) -> List[str]:
    """
    本文をページごとのテキストに分割する

    Args:
        content: 本文
        page_size: 1ページの最大文字数（1以上）

    Returns:
        ページテキストのリスト（連結すると content に一致）

    Raises:
        ValueError: page_size が1未満の場合
    """
    if page_size < 1:
        raise ValueError(f"page_size は1以上を指定してください: {page_size}")

    if len(content) <= page_size:
        return [content]

    pages: List[str] = []
    start = 0
    text_len = len(content)

    while start < text_len:
        end = start + page_size
        if end >= text_len:
            pages.append(content[start:])
            break

        window = content[start:end]
        end = start + _find_break(window)
        pages.append(content[start:end])
        start = end

    return pages
