"""
ドキュメント関連の型定義（データの形を明示）

【初心者向け】
- dataclass: フィールドだけ持つ軽量なクラス。ストアとのやりとりでよく使う
- Document = 1ファイル分。ページ（Page）の順序付きリストを持つ
- Page = ドキュメント内の1ページ。page_number（1始まり）で並び順が決まる
- fingerprint は「全ページを page_number 順に連結した本文」のハッシュ
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class Page:
    """ページ（ドキュメント内の1ブロック）"""
    id: int
    document_id: int   # 所属ドキュメントのID
    page_number: int   # 1始まり、ドキュメント内で一意
    content: Optional[str] = ""  # 空文字列はOK。None は外部ストア由来のみ


@dataclass
class Document:
    """ドキュメント（1ファイル単位）"""
    id: int
    name: str           # 表示名（例: notes.txt）
    fingerprint: str    # 本文のハッシュ（16進文字列）
    created_at: datetime
    modified_at: datetime
    pages: Optional[List[Page]] = field(default_factory=list)

    def ordered_pages(self) -> List[Page]:
        """page_number 順に並べたページ一覧"""
        if self.pages is None:
            return []
        return sorted(self.pages, key=lambda page: page.page_number)

    @property
    def content(self) -> str:
        """全ページの本文を page_number 順に連結したもの"""
        return "".join(page.content or "" for page in self.ordered_pages())
