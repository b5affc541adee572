"""
キーワード検索（ページ本文に対する大文字小文字無視の部分一致）

【初心者向け】
- TF-IDF のような「関連度」ではなく、単純に「その文字列を含むか」だけを見る
- 1ドキュメント内で最初にヒットしたページで打ち切り、ドキュメント名は1回だけ返す
- 入力不備（キーワードが短い・None など）は例外にせず空リストを返す
"""
import logging
from typing import Iterable, List, Optional

from textcore.core.settings import settings
from textcore.docs.models import Document

# ロガー設定
logger = logging.getLogger(__name__)


def search_keyword(keyword: Optional[str], documents: Optional[Iterable[Document]]) -> List[str]:
    """
    キーワードを含むドキュメント名の一覧を返す

    - keyword が None / 空 / trim後に最小文字数未満 → 空リスト
    - documents が None → 空リスト
    - pages が None のドキュメント、content が None のページはスキップ

    Args:
        keyword: 検索キーワード
        documents: 検索対象ドキュメント（リスト・ジェネレータなど1回走査できれば可）

    Returns:
        ドキュメント名のリスト（入力順、重複なし）
    """
    found: List[str] = []

    if keyword is None or len(keyword.strip()) < settings.keyword_min_length:
        logger.debug(
            f"keyword検索スキップ: keyword={keyword!r}, "
            f"min_length={settings.keyword_min_length}"
        )
        return found

    if documents is None:
        logger.debug("keyword検索スキップ: documents=None")
        return found

    keyword_folded = keyword.casefold()
    scanned = 0

    for document in documents:
        scanned += 1
        if document.pages is None:
            continue

        for page in document.ordered_pages():
            if page.content is None:
                continue
            if keyword_folded in page.content.casefold():
                found.append(document.name)
                break  # 同じドキュメントは1回だけ

    logger.info(
        f"keyword検索結果: keyword='{keyword}', "
        f"documents={scanned}, hits={len(found)}"
    )
    return found
