"""In-memory document store, immutable after load."""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import structlog

from ..models.document import Document, ProposalMetadata

logger = structlog.get_logger(__name__)


class DocumentStore:
    """Ordered collection of documents with lookup by program id."""

    def __init__(self, documents: Iterable[Document]) -> None:
        """
        Initialize the store.

        Args:
            documents: Parsed documents, in load order
        """
        self._documents: Tuple[Document, ...] = tuple(documents)
        self._by_id: Dict[str, Document] = {}

        for document in self._documents:
            key = document.metadata.id_text()
            if not key:
                continue
            if key in self._by_id:
                logger.warning(
                    "Duplicate program id, keeping first",
                    program_id=key,
                    kept=self._by_id[key].id,
                    ignored=document.id,
                )
                continue
            self._by_id[key] = document

    def get_all(self) -> Tuple[Document, ...]:
        """Get every document in load order."""
        return self._documents

    def get_by_id(self, key: Any) -> Optional[Document]:
        """
        Look up a document by its program id.

        Args:
            key: Program id as int or text

        Returns:
            The document or None if not found
        """
        if key is None:
            return None
        return self._by_id.get(str(key).strip())

    def get_metadata_list(self) -> List[ProposalMetadata]:
        """Get the metadata of every document, in load order."""
        return [document.metadata for document in self._documents]

    def get_stats(self) -> Dict[str, int]:
        """Get store statistics."""
        return {
            "total_documents": len(self._documents),
            "addressable_documents": len(self._by_id),
        }

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)
