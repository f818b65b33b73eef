"""Document loaders — thin wrappers around LangChain's PDF loaders."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from itertools import groupby
from pathlib import Path

from langchain_community.document_loaders import DirectoryLoader, PyPDFLoader
from langchain_core.documents import Document

logger = logging.getLogger(__name__)

PDF_GLOB = "**/*.pdf"
PAGE_SEPARATOR = "\n"


def load_pdf_directory(path: str | Path, *, per_page: bool = False) -> list[Document]:
    """Load every PDF found under *path*.

    Parameters
    ----------
    path:
        Directory containing the source PDFs (searched recursively).
    per_page:
        When ``True`` every page becomes its own ``Document`` (the
        ``PyPDFLoader`` granularity).  Otherwise the pages of a file are
        joined into one ``Document`` per file.

    Returns
    -------
    list[Document]
        Documents ordered by source path, then page.

    Raises
    ------
    FileNotFoundError
        *path* does not exist.
    NotADirectoryError
        *path* is not a directory.
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"Documents directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Documents path is not a directory: {root}")

    loader = DirectoryLoader(
        str(root),
        glob=PDF_GLOB,
        loader_cls=PyPDFLoader,  # type: ignore[arg-type]
    )
    pages = sorted(loader.load(), key=_page_sort_key)
    logger.info("Loaded %d page(s) from %s", len(pages), root)

    if per_page:
        return pages
    return [merge_pages(group) for _, group in groupby(pages, key=lambda d: d.metadata["source"])]


def load_pdf(path: str | Path, *, per_page: bool = False) -> list[Document]:
    """Load a single PDF file."""
    pages = PyPDFLoader(str(path)).load()
    if per_page or not pages:
        return pages
    return [merge_pages(pages)]


def merge_pages(pages: Iterable[Document]) -> Document:
    """Join the pages of one file into a single ``Document``.

    The character offset at which every page starts inside the joined
    text is kept under ``page_starts`` so chunks can be mapped back to
    their source page.
    """
    pages = list(pages)
    page_starts: list[int] = []
    parts: list[str] = []
    offset = 0
    for page in pages:
        page_starts.append(offset)
        parts.append(page.page_content)
        offset += len(page.page_content) + len(PAGE_SEPARATOR)

    first = pages[0].metadata
    metadata = {
        "source": first.get("source", "unknown"),
        "total_pages": len(pages),
        "page_starts": page_starts,
    }
    return Document(page_content=PAGE_SEPARATOR.join(parts), metadata=metadata)


def _page_sort_key(document: Document) -> tuple[str, int]:
    return str(document.metadata.get("source", "")), int(document.metadata.get("page", 0))
