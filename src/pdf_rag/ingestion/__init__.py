"""
Ingestion — PDF loading, chunking, embedding and upserting into the vector store.

Documents are processed one at a time: all chunks of a document are
embedded in one call and written to the index before the next document
is chunked.
"""
