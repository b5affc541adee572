"""
読み書きロック（複数リーダー / 単一ライター）

【初心者向け】
- threading.Lock は「同時に1スレッドだけ」なので、読み取り同士も待たされる
- ReadWriteLock は読み取り（read）同士は並行OK、書き込み（write）は排他
- ライター優先: 書き込み待ちがいる間は新しい読み取りを待たせる（書き込みが飢えない）
"""
import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """threading.Condition ベースの読み書きロック"""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer_active or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers > 0:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True

    def release_write(self) -> None:
        with self._cond:
            self._writer_active = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """with lock.read_locked(): の形で読み取り区間を作る"""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """with lock.write_locked(): の形で書き込み（排他）区間を作る"""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
