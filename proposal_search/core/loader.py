"""Parsing of raw proposal records into documents."""

import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import structlog
import yaml
from pydantic import ValidationError

from ..models.document import Document, ProposalMetadata, UNTITLED

logger = structlog.get_logger(__name__)

# Only a block at the very start of the blob is front matter
_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a front matter block exists but cannot be used."""


def has_front_matter(text: str) -> bool:
    """Whether the blob starts with a delimited front matter block."""
    return bool(_FRONT_MATTER_RE.match(text))


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a blob into its front matter mapping and body.

    Returns:
        (front_matter_dict, body). Without a front matter block the dict is
        empty and the body is the whole text.

    Raises:
        FrontMatterError: If the block is not valid YAML or not a mapping.
    """
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    block, body = match.group(1), match.group(2)
    try:
        data = yaml.safe_load(block) if block.strip() else {}
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"Front matter must be a mapping, got {type(data).__name__}")
    return data, body


def load_document(source_name: str, text: str) -> Document:
    """
    Build a document from one raw blob.

    Malformed front matter never fails the load: the document falls back to
    empty metadata with the raw blob as content.
    """
    if not has_front_matter(text):
        return Document(id=source_name, title=UNTITLED, content=text)

    try:
        data, body = parse_front_matter(text)
        metadata = ProposalMetadata(**{str(k): v for k, v in data.items()})
    except (FrontMatterError, ValidationError) as e:
        logger.warning("Malformed front matter", source=source_name, error=str(e))
        return Document(id=source_name, title=UNTITLED, content=text)

    return Document(
        id=source_name,
        title=metadata.program_title or UNTITLED,
        content=body.strip(),
        metadata=metadata,
    )


def load_documents(blobs: Iterable[Tuple[str, str]]) -> List[Document]:
    """Parse ``(source_name, text)`` pairs, keeping their order."""
    return [load_document(name, text) for name, text in blobs]


def load_directory(directory: Union[str, Path], pattern: str = "*.md") -> List[Document]:
    """
    Load every matching file of a directory, sorted by filename.

    Files that cannot be read are logged and skipped.
    """
    directory = Path(directory)
    blobs = []
    for path in sorted(directory.glob(pattern)):
        if not path.is_file():
            continue
        try:
            blobs.append((path.name, path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable corpus file", path=str(path), error=str(e))

    documents = load_documents(blobs)
    logger.info("Corpus loaded", directory=str(directory), documents=len(documents))
    return documents
