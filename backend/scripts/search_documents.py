#!/usr/bin/env python3
"""
キーワード検索スクリプト

ドキュメントディレクトリの .txt を in-memory ストアに取り込み、
キーワードを含むドキュメント名を表示します。

使用方法:
    cd backend
    source .venv/bin/activate
    python scripts/search_documents.py KEYWORD [--docs-dir DIR]
"""
import sys
import logging
from pathlib import Path

# プロジェクトルートをパスに追加
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from textcore.core.settings import settings
from textcore.docs.store import InMemoryDocumentStore
from textcore.editor.service import EditorService

# ロガー設定
logging.basicConfig(
    level=logging.WARNING,  # WARNING 以上のみ表示
    format='%(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """メイン処理"""
    import argparse

    parser = argparse.ArgumentParser(description='キーワード検索スクリプト')
    parser.add_argument('keyword', help='検索キーワード（3文字以上）')
    parser.add_argument(
        '--docs-dir',
        default=settings.docs_dir,
        help='読み込むドキュメントディレクトリ'
    )
    args = parser.parse_args()

    docs_path = Path(args.docs_dir)
    if not docs_path.is_dir():
        logger.error(f"ドキュメントディレクトリが存在しません: {docs_path.resolve()}")
        sys.exit(1)

    service = EditorService(InMemoryDocumentStore())
    for txt_file in sorted(docs_path.glob("*.txt")):
        service.import_text_file(txt_file)

    results = service.search_keyword(args.keyword)

    print(f"キーワード: '{args.keyword}' → {len(results)}件")
    for name in results:
        print(f"  - {name}")


if __name__ == "__main__":
    main()
