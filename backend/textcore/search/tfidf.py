"""
TF-IDF コーパスインデックス（追記型コーパス + 候補ドキュメントの関連度スコア）

【初心者向け】
- add_document(): テキストを正規化・トークン化して「コーパス」に1件追加する
- score(): 候補テキストの各単語について tf × idf を計算して合計する
  - tf(t)  = 候補中の t の出現数 / 候補の総トークン数
  - idf(t) = ln((N + 1) / (1 + df(t)))  N=コーパス件数, df=t を含むコーパス件数
  - +1 の平滑化で、どのコーパスにも無い単語でも有限・非負になる
- コーパスは複数スレッドから使われる前提。読み取り（score）は並行OK、
  追加（add_document）は ReadWriteLock で排他
"""
import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Optional

from textcore.core.locks import ReadWriteLock
from textcore.text.normalizer import tokenize

# ロガー設定
logger = logging.getLogger(__name__)


class TfIdfCorpusIndex:
    """追記型の TF-IDF コーパス"""

    def __init__(self) -> None:
        self._entries: List[Counter] = []
        # 単語ごとの出現ドキュメント数（add_document のたびに更新）
        self._document_frequency: Counter = Counter()
        self._lock = ReadWriteLock()

    def add_document(self, text: Optional[str]) -> None:
        """
        テキストを1件コーパスに追加する

        空文字列や None でも「トークン0件のドキュメント」として1件増える

        Args:
            text: 追加するテキスト
        """
        entry = Counter(tokenize(text))

        with self._lock.write_locked():
            self._entries.append(entry)
            self._document_frequency.update(entry.keys())
            size = len(self._entries)

        logger.debug(f"コーパス追加: tokens={sum(entry.values())}, corpus_size={size}")

    def add_documents(self, texts: Iterable[Optional[str]]) -> None:
        """複数テキストを順番に追加する"""
        for text in texts:
            self.add_document(text)

    def clear(self) -> None:
        """コーパスを空にする（再読み込み時に使用）"""
        with self._lock.write_locked():
            self._entries.clear()
            self._document_frequency.clear()
        logger.info("TF-IDFコーパスをクリアしました")

    @property
    def size(self) -> int:
        """コーパスの件数"""
        with self._lock.read_locked():
            return len(self._entries)

    def __len__(self) -> int:
        return self.size

    def document_frequency(self, term: str) -> int:
        """term を1回以上含むコーパス件数"""
        with self._lock.read_locked():
            return self._document_frequency.get(term, 0)

    def idf(self, term: str) -> float:
        """平滑化した IDF（ln((N + 1) / (1 + df))）"""
        with self._lock.read_locked():
            return self._idf(term, len(self._entries))

    def term_scores(self, text: Optional[str]) -> Dict[str, float]:
        """
        候補テキストの単語ごとの tf × idf を返す

        - 単語は候補テキスト中の初出順
        - コーパスが空、または候補のトークンが0件なら空の辞書

        Args:
            text: 候補テキスト

        Returns:
            { 単語: tf × idf } の辞書（初出順）
        """
        tokens = tokenize(text)
        if not tokens:
            return {}

        # Counter は初出順を保持する
        counts = Counter(tokens)
        total = len(tokens)

        with self._lock.read_locked():
            corpus_size = len(self._entries)
            if corpus_size == 0:
                return {}
            return {
                term: (count / total) * self._idf(term, corpus_size)
                for term, count in counts.items()
            }

    def score(self, text: Optional[str]) -> float:
        """
        候補テキストの TF-IDF スコア（単語ごとの tf × idf の合計）

        - コーパスが空なら 0.0
        - 候補が空・空白のみ・記号のみ・None なら 0.0
        - 同じコーパス状態・同じ入力なら常に同じ値（合計順は初出順で固定）

        Args:
            text: 候補テキスト

        Returns:
            0以上の有限な float
        """
        total = 0.0
        for value in self.term_scores(text).values():
            total += value

        logger.debug(f"TF-IDFスコア: score={total:.6f}")
        return total

    def _idf(self, term: str, corpus_size: int) -> float:
        # ロック取得済みの状態で呼ぶこと
        df = self._document_frequency.get(term, 0)
        return math.log((corpus_size + 1) / (1 + df))
