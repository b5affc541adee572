"""
エディタのビジネスロジック層（ストアへの委譲 + 解析処理の入口）

【初心者向け】
- EditorService は「画面側から呼ばれる窓口」。CRUD は DocumentStore に任せる
- キーワード検索・TF-IDF・フィンガープリントはこのリポジトリの解析コアを使う
- 見出し語化などの言語解析は LinguisticAnalyzer（外部サービス）にそのまま渡す
"""
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from textcore.core.errors import raise_unsupported
from textcore.core.settings import settings
from textcore.docs.loader import load_txt_file
from textcore.docs.models import Document
from textcore.docs.store import DocumentStore, LinguisticAnalyzer
from textcore.search.keyword import search_keyword
from textcore.search.tfidf import TfIdfCorpusIndex

# ロガー設定
logger = logging.getLogger(__name__)


class EditorService:
    """エディタ操作の窓口"""

    def __init__(self, store: DocumentStore, analyzer: Optional[LinguisticAnalyzer] = None):
        self._store = store
        self._analyzer = analyzer

    # --- ファイル操作（ストアへ委譲） ---

    def create_file(self, name: str, content: Optional[str]) -> bool:
        return self._store.create_file(name, content)

    def import_text_file(self, file_path: Union[str, Path], name: Optional[str] = None) -> bool:
        """
        ディスク上のテキストファイルを取り込む

        - 拡張子が settings.import_allowed_extensions に無ければ False
        - 読み込みに失敗したら False（ログのみ）

        Args:
            file_path: 取り込むファイル
            name: 登録名（未指定ならファイル名）

        Returns:
            作成できたら True
        """
        display_name = name or Path(file_path).name
        extension = self.get_file_extension(display_name).lower()

        if extension not in settings.import_allowed_extensions:
            logger.warning(
                f"インポート失敗（未対応の拡張子）: name='{display_name}', "
                f"extension='{extension}', allowed={settings.import_allowed_extensions}"
            )
            return False

        try:
            _, content = load_txt_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"インポート失敗（読み込みエラー）: {file_path} - {type(e).__name__}: {e}")
            return False

        return self.create_file(display_name, content)

    @staticmethod
    def get_file_extension(file_name: str) -> str:
        """最後のドットより後ろ（無ければ空文字列）"""
        dot = file_name.rfind(".")
        if dot == -1:
            return ""
        return file_name[dot + 1:]

    def get_file(self, document_id: int) -> Optional[Document]:
        for document in self._store.list_files():
            if document.id == document_id:
                return document
        return None

    def get_all_files(self) -> List[Document]:
        return self._store.list_files()

    def update_file(self, document_id: int, name: str, page_number: int, content: Optional[str]) -> bool:
        return self._store.update_file(document_id, name, page_number, content)

    def delete_file(self, document_id: int) -> bool:
        return self._store.delete_file(document_id)

    def fingerprint_of(self, document_id: int) -> Optional[str]:
        document = self.get_file(document_id)
        return document.fingerprint if document else None

    # --- 解析 ---

    def search_keyword(self, keyword: Optional[str]) -> List[str]:
        """保存済みドキュメント全体からキーワードを含むドキュメント名を返す"""
        return search_keyword(keyword, self.get_all_files())

    def calculate_tfidf(self, unselected_contents: Iterable[Optional[str]], selected_content: Optional[str]) -> float:
        """
        選択ドキュメントの TF-IDF スコアを計算する

        選択されていないドキュメント群をコーパスにして、選択ドキュメントを採点する

        Args:
            unselected_contents: コーパスにする本文のリスト
            selected_content: 採点する本文

        Returns:
            TF-IDF スコア
        """
        index = TfIdfCorpusIndex()
        index.add_documents(unselected_contents)
        score = index.score(selected_content)
        logger.info(f"TF-IDF計算: corpus_size={index.size}, score={score:.6f}")
        return score

    # --- 言語解析（外部サービスへ委譲） ---

    def lemmatize(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().lemmatize(text)

    def extract_parts_of_speech(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().extract_parts_of_speech(text)

    def extract_roots(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().extract_roots(text)

    def stem(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().stem(text)

    def segment(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().segment(text)

    def transliterate(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().transliterate(text)

    def pmi(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().pmi(text)

    def pkl(self, text: str) -> Mapping[str, Any]:
        return self._require_analyzer().pkl(text)

    def _require_analyzer(self) -> LinguisticAnalyzer:
        if self._analyzer is None:
            raise_unsupported("言語解析サービスが設定されていません")
        return self._analyzer
