from textcore.text.fingerprint import fingerprint


def test_create_file_sets_fingerprint(store):
    assert store.create_file("notes.txt", "Test content")

    document = store.list_files()[0]
    assert document.id == 1
    assert document.name == "notes.txt"
    assert document.fingerprint == fingerprint("Test content")
    assert document.created_at == document.modified_at


def test_create_file_empty_content(store):
    assert store.create_file("empty.txt", "")

    document = store.list_files()[0]
    assert [page.content for page in document.pages] == [""]
    assert document.fingerprint == fingerprint("")


def test_create_file_rejects_none_content_and_blank_name(store):
    assert not store.create_file("null.txt", None)
    assert not store.create_file("  ", "content")
    assert store.list_files() == []


def test_long_content_is_paginated(store):
    content = "word " * 40
    store.create_file("long.txt", content)

    document = store.list_files()[0]
    assert len(document.pages) > 1
    assert [page.page_number for page in document.pages] == list(range(1, len(document.pages) + 1))
    assert document.content == content
    assert document.fingerprint == fingerprint(content)


def test_update_page_recomputes_fingerprint(store):
    store.create_file("doc.txt", "Original file content for testing")
    before = store.get_file(1).fingerprint

    assert store.update_file(1, "doc.txt", 1, "Modified file content for testing")

    document = store.get_file(1)
    assert document.fingerprint != before
    assert document.fingerprint == fingerprint(document.content)
    assert document.modified_at >= document.created_at


def test_update_same_content_keeps_modified_at(store):
    store.create_file("doc.txt", "same")
    modified_at = store.get_file(1).modified_at

    assert store.update_file(1, "doc.txt", 1, "same")
    assert store.get_file(1).modified_at == modified_at


def test_update_appends_next_page(store):
    store.create_file("doc.txt", "page one. ")

    assert store.update_file(1, "renamed.txt", 2, "page two.")

    document = store.get_file(1)
    assert document.name == "renamed.txt"
    assert document.content == "page one. page two."
    assert document.fingerprint == fingerprint("page one. page two.")


def test_update_rejects_gap_unknown_id_and_none(store):
    store.create_file("doc.txt", "content")

    assert not store.update_file(1, "doc.txt", 5, "gap")
    assert not store.update_file(99, "doc.txt", 1, "missing")
    assert not store.update_file(1, "doc.txt", 1, None)
    assert store.get_file(1).content == "content"


def test_delete_file(store):
    store.create_file("a.txt", "a")
    store.create_file("b.txt", "b")

    assert store.delete_file(1)
    assert not store.delete_file(1)
    assert [document.name for document in store.list_files()] == ["b.txt"]


def test_ids_are_stable_after_delete(store):
    store.create_file("a.txt", "a")
    store.delete_file(1)
    store.create_file("b.txt", "b")
    assert store.list_files()[0].id == 2


def test_rename_only_keeps_fingerprint_of_content(store):
    store.create_file("old.txt", "unchanged body")
    before = store.get_file(1).fingerprint

    assert store.update_file(1, "new.txt", 1, "unchanged body")

    document = store.get_file(1)
    assert document.name == "new.txt"
    assert document.fingerprint == before == fingerprint("unchanged body")
