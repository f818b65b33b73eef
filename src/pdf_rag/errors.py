"""Exception hierarchy raised by the pipeline stages.

Nothing here is recovered locally: every error propagates to
:func:`pdf_rag.__main__.main`, which logs it and exits non-zero.
"""

from __future__ import annotations


class PdfRagError(Exception):
    """Base class for pipeline failures."""


class ProvisioningError(PdfRagError):
    """The vector index could not be listed or created."""


class EmbeddingError(PdfRagError):
    """The embedding service returned an unusable batch."""


class UpsertError(PdfRagError):
    """A batch of records could not be written to the vector store.

    Attributes
    ----------
    batch_number:
        1-based number of the batch that failed.
    start:
        Offset of the first record of the failed batch.
    """

    def __init__(self, message: str, *, batch_number: int, start: int) -> None:
        super().__init__(message)
        self.batch_number = batch_number
        self.start = start
