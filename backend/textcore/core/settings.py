"""
アプリケーション設定（環境変数・定数の一元管理）

【初心者向け】
- Pydantic Settings: 環境変数や.envを読んで型付きで扱うための仕組み
- ここで定義した値は textcore.core.settings.settings から参照できる
- 主な分類: キーワード検索, フィンガープリント, ページ分割, インポート
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定クラス
    環境変数（または.env）の値が自動でここにマッピングされる
    """

    # ドキュメントディレクトリ（scripts から読み込む .txt の置き場所）
    docs_dir: str = Field(
        default="documents",
        alias="DOCS_DIR",
        description="インポート対象ドキュメントのディレクトリ"
    )

    # キーワード検索設定
    keyword_min_length: int = Field(
        default=3,
        alias="KEYWORD_MIN_LENGTH",
        description="キーワード検索の最小文字数（trim後、これ未満は空結果）"
    )

    # フィンガープリント設定
    fingerprint_algorithm: str = Field(
        default="sha256",
        alias="FINGERPRINT_ALGORITHM",
        description="hashlibのアルゴリズム名（固定長ダイジェストのもの）"
    )

    # ページ分割設定
    page_size: int = Field(
        default=2000,
        alias="PAGE_SIZE",
        description="1ページあたりの最大文字数"
    )

    # インポート設定
    import_allowed_extensions: List[str] = Field(
        default=["txt"],
        alias="IMPORT_ALLOWED_EXTENSIONS",
        description="インポート可能な拡張子（ドットなし、小文字）"
    )
    import_encoding: str = Field(
        default="utf-8-sig",
        alias="IMPORT_ENCODING",
        description="インポート時のテキストエンコーディング"
    )

    # Pydantic v2の設定（Configクラスの代わりにmodel_configを使用）
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Fieldのaliasとフィールド名の両方で読み込み可能
        extra="ignore"
    )


# グローバル設定インスタンス
settings = Settings()
