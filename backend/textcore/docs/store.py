"""
永続化境界（ドキュメントストア / 言語解析サービスのインターフェース）

【初心者向け】
- DocumentStore: Protocol。作成・更新・削除・一覧の4操作を提供する約束
- LinguisticAnalyzer: Protocol。見出し語化・品詞・語根・PMI 等の外部サービス
  （中身のアルゴリズムはこのリポジトリでは実装しない）
- InMemoryDocumentStore: DocumentStore の in-memory 実装（テスト・スクリプト用）
  本文が変わるたびに fingerprint を再計算する
"""
import logging
import threading
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Protocol

from textcore.core.settings import settings
from textcore.docs.models import Document, Page
from textcore.docs.paginator import paginate
from textcore.text.fingerprint import fingerprint

# ロガー設定
logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    """
    ドキュメント永続化のインターフェース

    失敗は例外ではなく False で返す
    """

    def create_file(self, name: str, content: Optional[str]) -> bool:
        ...

    def update_file(self, document_id: int, name: str, page_number: int, content: Optional[str]) -> bool:
        ...

    def delete_file(self, document_id: int) -> bool:
        ...

    def list_files(self) -> List[Document]:
        ...


class LinguisticAnalyzer(Protocol):
    """
    言語解析サービスのインターフェース

    どのメソッドも生テキストを受け取り、{ 単語: 注釈 } の辞書を返す
    """

    def lemmatize(self, text: str) -> Mapping[str, Any]:
        ...

    def extract_parts_of_speech(self, text: str) -> Mapping[str, Any]:
        ...

    def extract_roots(self, text: str) -> Mapping[str, Any]:
        ...

    def stem(self, text: str) -> Mapping[str, Any]:
        ...

    def segment(self, text: str) -> Mapping[str, Any]:
        ...

    def transliterate(self, text: str) -> Mapping[str, Any]:
        ...

    def pmi(self, text: str) -> Mapping[str, Any]:
        ...

    def pkl(self, text: str) -> Mapping[str, Any]:
        ...


class InMemoryDocumentStore:
    """DocumentStore の in-memory 実装（キー：document_id、値：Document）"""

    def __init__(self, page_size: Optional[int] = None) -> None:
        self._documents: Dict[int, Document] = {}
        self._next_document_id = 1
        self._next_page_id = 1
        self._page_size = page_size or settings.page_size
        self._lock = threading.Lock()

    def create_file(self, name: str, content: Optional[str]) -> bool:
        """
        ドキュメントを作成する（本文はページ分割して保存）

        Args:
            name: 表示名
            content: 本文（None は作成失敗）

        Returns:
            作成できたら True
        """
        if content is None or not name or not name.strip():
            logger.warning(f"ドキュメント作成失敗: name={name!r}, content_is_none={content is None}")
            return False

        now = datetime.now()
        with self._lock:
            document_id = self._next_document_id
            self._next_document_id += 1

            pages = []
            for page_number, page_text in enumerate(paginate(content, self._page_size), start=1):
                pages.append(Page(
                    id=self._allocate_page_id(),
                    document_id=document_id,
                    page_number=page_number,
                    content=page_text,
                ))

            self._documents[document_id] = Document(
                id=document_id,
                name=name,
                fingerprint=fingerprint(content),
                created_at=now,
                modified_at=now,
                pages=pages,
            )

        logger.info(f"ドキュメント作成: id={document_id}, name='{name}', pages={len(pages)}")
        return True

    def update_file(self, document_id: int, name: str, page_number: int, content: Optional[str]) -> bool:
        """
        指定ページの本文を置き換える（最終ページ+1 なら追加）

        Args:
            document_id: ドキュメントID
            name: 新しい表示名
            page_number: 対象ページ番号
            content: 新しいページ本文

        Returns:
            更新できたら True
        """
        if content is None:
            logger.warning(f"ドキュメント更新失敗（content=None）: id={document_id}")
            return False

        with self._lock:
            document = self._documents.get(document_id)
            if document is None:
                logger.warning(f"ドキュメント更新失敗（存在しない）: id={document_id}")
                return False

            pages = {page.page_number: page for page in document.ordered_pages()}
            last_page_number = max(pages) if pages else 0

            if page_number in pages:
                pages[page_number].content = content
            elif page_number == last_page_number + 1:
                document.pages.append(Page(
                    id=self._allocate_page_id(),
                    document_id=document_id,
                    page_number=page_number,
                    content=content,
                ))
            else:
                logger.warning(
                    f"ドキュメント更新失敗（ページ番号不正）: id={document_id}, "
                    f"page_number={page_number}, last_page={last_page_number}"
                )
                return False

            renamed = bool(name) and name != document.name
            if renamed:
                document.name = name

            current = fingerprint(document.content)
            if current != document.fingerprint or renamed:
                document.fingerprint = current
                document.modified_at = datetime.now()

        logger.info(f"ドキュメント更新: id={document_id}, page_number={page_number}")
        return True

    def delete_file(self, document_id: int) -> bool:
        with self._lock:
            removed = self._documents.pop(document_id, None)

        if removed is None:
            logger.warning(f"ドキュメント削除失敗（存在しない）: id={document_id}")
            return False

        logger.info(f"ドキュメント削除: id={document_id}, name='{removed.name}'")
        return True

    def list_files(self) -> List[Document]:
        """作成順のドキュメント一覧"""
        with self._lock:
            return list(self._documents.values())

    def get_file(self, document_id: int) -> Optional[Document]:
        with self._lock:
            return self._documents.get(document_id)

    def _allocate_page_id(self) -> int:
        # self._lock 取得済みで呼ぶこと
        page_id = self._next_page_id
        self._next_page_id += 1
        return page_id
