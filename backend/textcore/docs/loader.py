"""
ドキュメント読み込みモジュール（ディスク上の .txt を読む）
"""
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from textcore.core.settings import settings

# ロガー設定
logger = logging.getLogger(__name__)


def load_txt_file(file_path: Union[str, Path], encoding: Optional[str] = None) -> Tuple[str, str]:
    """
    TXTファイルを読み込む

    Args:
        file_path: ファイルパス
        encoding: 文字コード（未指定なら settings.import_encoding）

    Returns:
        (ファイル名, 本文)
    """
    path = Path(file_path)
    with open(path, "r", encoding=encoding or settings.import_encoding) as f:
        text = f.read()

    logger.debug(f"TXT読み込み: {path.name} - {len(text)}文字")
    return path.name, text


def load_txt_files(docs_dir: Union[str, Path]) -> List[Tuple[str, str]]:
    """
    ディレクトリ配下の .txt をファイル名順に読み込む

    読み込めなかったファイルはログに記録してスキップする

    Args:
        docs_dir: ドキュメントディレクトリ

    Returns:
        (ファイル名, 本文) のリスト
    """
    docs_path = Path(docs_dir).resolve()
    loaded: List[Tuple[str, str]] = []

    if not docs_path.exists():
        logger.warning(f"ドキュメントディレクトリが存在しません: {docs_path}")
        return loaded

    for txt_file in sorted(docs_path.glob("*.txt")):
        try:
            loaded.append(load_txt_file(txt_file))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"TXT読み込みエラー（スキップ）: {txt_file.name} - {type(e).__name__}: {e}")
            continue

    logger.info(f"ドキュメント読み込み完了: {len(loaded)}ファイル ({docs_path})")
    return loaded
