#!/usr/bin/env python3
"""
TF-IDF スコア確認スクリプト

ドキュメントディレクトリの .txt を読み込み、各ファイルを「他のファイル全体を
コーパスにしたとき」の TF-IDF スコアとフィンガープリントを表示します。

使用方法:
    cd backend
    source .venv/bin/activate
    python scripts/score_documents.py [--docs-dir DIR] [--terms N]

オプション:
    --docs-dir: 読み込むディレクトリ（未指定なら DOCS_DIR 設定値）
    --terms: ファイルごとに表示する上位単語数（デフォルト0=表示しない）
"""
import sys
import logging
from pathlib import Path

# プロジェクトルートをパスに追加
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from textcore.core.settings import settings
from textcore.docs.loader import load_txt_files
from textcore.search.tfidf import TfIdfCorpusIndex
from textcore.text.fingerprint import fingerprint

# ロガー設定
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """メイン処理"""
    import argparse

    parser = argparse.ArgumentParser(description='TF-IDF スコア確認スクリプト')
    parser.add_argument(
        '--docs-dir',
        default=settings.docs_dir,
        help='読み込むドキュメントディレクトリ'
    )
    parser.add_argument(
        '--terms',
        type=int,
        default=0,
        help='ファイルごとに表示する上位単語数'
    )
    args = parser.parse_args()

    files = load_txt_files(args.docs_dir)
    if len(files) < 2:
        logger.error(f"スコア計算には2ファイル以上必要です: {len(files)}ファイル ({args.docs_dir})")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info(f"TF-IDF スコア計算を開始します: {len(files)}ファイル")
    logger.info("=" * 60)

    for name, text in files:
        index = TfIdfCorpusIndex()
        index.add_documents(other for other_name, other in files if other_name != name)

        score = index.score(text)
        print(f"{name:40s} score={score:.6f} fingerprint={fingerprint(text)[:16]}")

        if args.terms > 0:
            term_scores = index.term_scores(text)
            top_terms = sorted(term_scores.items(), key=lambda x: x[1], reverse=True)[:args.terms]
            for term, value in top_terms:
                print(f"    {term:30s} {value:.6f}")


if __name__ == "__main__":
    main()
