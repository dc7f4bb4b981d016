import logging

import pytest

from degree_audit.data import AuditDocument, DocumentLoader
from degree_audit.exceptions import DocumentLoadError


def test_load_file(tmp_path, sample_audit):
    path = tmp_path / "audit.html"
    path.write_text(sample_audit, encoding="utf-8")
    document = DocumentLoader().load(path)
    assert document.source == str(path)
    assert "CSE CORE COURSES" in document.html


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load(tmp_path / "missing.html")


def test_directory_is_a_load_error(tmp_path):
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load_file(tmp_path)


def test_load_bytes_with_declared_charset():
    html = '<html><head><meta charset="windows-1252"></head><body><div class="reqTitle">Fran\xe7ais</div></body></html>'
    document = DocumentLoader().load(html.encode("windows-1252"))
    assert "Français" in document.html


def test_load_utf8_bytes():
    document = DocumentLoader().load("<p>Gödel</p>".encode("utf-8"))
    assert "Gödel" in document.html


def test_string_is_markup_not_a_path():
    document = DocumentLoader().load("<html></html>")
    assert document == AuditDocument(html="<html></html>")


def test_path_like_string_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="degree_audit.data.loader"):
        document = DocumentLoader().load("audit.html")
    assert document.html == "audit.html"
    assert "contains no markup" in caplog.text


def test_markup_string_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="degree_audit.data.loader"):
        DocumentLoader().load("<html></html>")
    assert caplog.records == []


def test_document_handle_passes_through():
    document = AuditDocument(html="<p></p>", source="x")
    assert DocumentLoader().load(document) is document


def test_unsupported_source():
    with pytest.raises(DocumentLoadError):
        DocumentLoader().load(42)


def test_document_is_immutable():
    document = AuditDocument(html="<p></p>")
    with pytest.raises(AttributeError):
        document.html = "<div></div>"
