"""
Audit document loading.

This module handles reading the exported degree-audit HTML from disk or from
memory and decoding it to text. It is the only place where a document-load
failure is raised.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from bs4 import UnicodeDammit

from ..exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditDocument:
    """
    Immutable handle to one loaded audit.

    The handle is what gets passed around instead of shared "current upload"
    state: the parser reads it, and an aggregation started for one handle is
    discarded when a different handle is loaded.
    """
    html: str
    source: str = "<memory>"

    def __repr__(self):
        return f"AuditDocument(source={self.source!r}, {len(self.html)} chars)"


class DocumentLoader:
    """
    Loads audit documents from files, bytes or strings.

    WHY ENCODING DETECTION: Audits are saved from the browser with "Save
    Page As", which usually writes UTF-8 but sometimes the page's declared
    charset (windows-1252 on older exports). UnicodeDammit tries the BOM,
    then UTF-8, then the <meta charset> declaration, then guesses.

    Usage:
        loader = DocumentLoader()
        document = loader.load(Path("audit.html"))
        document = loader.load("<html>...</html>")
    """

    PREFERRED_ENCODINGS = ["utf-8"]

    def load(self, source) -> AuditDocument:
        """
        Load a document from a path, raw bytes, or an HTML string.

        A `str` is always treated as markup, never as a path. Use a
        `pathlib.Path` (or `load_file`) to read from disk. A string with
        no markup in it is logged as a warning, since it is usually a path
        passed by mistake.
        """
        if isinstance(source, AuditDocument):
            return source
        if isinstance(source, Path):
            return self.load_file(source)
        if isinstance(source, (bytes, bytearray)):
            return self.load_bytes(bytes(source))
        if isinstance(source, str):
            if source.strip() and "<" not in source:
                logger.warning("Audit source %.60r contains no markup; pass a pathlib.Path to read a file", source)
            return self.load_text(source)
        raise DocumentLoadError(f"Unsupported audit source type: {type(source).__name__}")

    def load_file(self, path) -> AuditDocument:
        filepath = Path(path)
        try:
            data = filepath.read_bytes()
        except OSError as e:
            raise DocumentLoadError(f"Could not read audit file {filepath}: {e}") from e
        return self.load_bytes(data, source=str(filepath))

    def load_bytes(self, data: bytes, source: str = "<memory>") -> AuditDocument:
        dammit = UnicodeDammit(data, user_encodings=self.PREFERRED_ENCODINGS, is_html=True)
        if dammit.unicode_markup is None:
            raise DocumentLoadError(f"Could not decode audit document {source}")
        logger.debug("Decoded %s as %s", source, dammit.original_encoding)
        return AuditDocument(html=dammit.unicode_markup, source=source)

    def load_text(self, html: str, source: str = "<memory>") -> AuditDocument:
        return AuditDocument(html=html, source=source)
