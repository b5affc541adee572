from datetime import datetime

import pytest

from textcore.docs.models import Document, Page
from textcore.docs.store import InMemoryDocumentStore
from textcore.editor.service import EditorService


def make_document(document_id, name, *contents):
    """テスト用ドキュメント（ページ本文を順に並べる）"""
    pages = [
        Page(id=document_id * 100 + number, document_id=document_id, page_number=number, content=content)
        for number, content in enumerate(contents, start=1)
    ]
    stamp = datetime(2024, 1, 1)
    return Document(
        id=document_id,
        name=name,
        fingerprint=f"hash{document_id}",
        created_at=stamp,
        modified_at=stamp,
        pages=pages,
    )


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def sample_documents():
    return [
        make_document(1, "doc1.txt", "The quick brown fox jumps over the lazy dog"),
        make_document(2, "doc2.txt", "Java programming is fun and challenging"),
        make_document(3, "doc3.txt", "Testing software requires patience and skill"),
        make_document(4, "doc4.txt", "بسم الله الرحمن الرحيم"),
        make_document(5, "doc5.txt", "الحمد لله رب العالمين"),
    ]


@pytest.fixture
def store():
    return InMemoryDocumentStore(page_size=50)


@pytest.fixture
def service(store):
    return EditorService(store)
