"""Filtering, sorting and pagination of the metadata listing."""

import math
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from ..models.document import ProposalMetadata
from ..models.response import MetadataPage

METADATA_COLUMNS: Tuple[str, ...] = tuple(ProposalMetadata.model_fields)


class MetadataQuery(BaseModel):
    """Filter, sort and page options for the metadata listing."""

    filters: Dict[str, str] = Field(default_factory=dict, description="Column to substring filter")
    sort_key: Optional[str] = Field(None, description="Column to sort by")
    direction: Literal["asc", "desc"] = Field(default="asc", description="Sort direction")
    page: int = Field(default=1, description="Requested page, clamped to the valid range")
    page_size: int = Field(default=50, ge=1, description="Records per page")

    @field_validator('filters')
    @classmethod
    def validate_filters(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Only known columns can be filtered."""
        unknown = set(v) - set(METADATA_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown filter columns: {sorted(unknown)}")
        return v

    @field_validator('sort_key')
    @classmethod
    def validate_sort_key(cls, v: Optional[str]) -> Optional[str]:
        """Only known columns can be sorted."""
        if v is not None and v not in METADATA_COLUMNS:
            raise ValueError(f"Unknown sort column: {v}")
        return v


def filter_metadata(records: Sequence[ProposalMetadata], filters: Dict[str, str]) -> List[ProposalMetadata]:
    """Keep records whose columns contain every filter value, case-insensitively."""
    active = {key: value.lower() for key, value in filters.items() if value}
    return [
        record for record in records
        if all(value in _filter_text(getattr(record, key)) for key, value in active.items())
    ]


def _filter_text(value: Any) -> str:
    return "" if value is None else str(value).lower()


def _sort_value(value: Any) -> Tuple[int, Any]:
    # numbers before text, missing values last
    if value is None:
        return (2, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value).lower())


def sort_metadata(
    records: Sequence[ProposalMetadata],
    sort_key: Optional[str],
    direction: str = "asc",
) -> List[ProposalMetadata]:
    """
    Sort records by one column.

    Descending order is the exact reverse of ascending order, ties included.
    Without a sort key the input order is kept.
    """
    if not sort_key:
        return list(records)

    ordered = sorted(records, key=lambda record: _sort_value(getattr(record, sort_key)))
    if direction == "desc":
        ordered.reverse()
    return ordered


def paginate(records: Sequence[ProposalMetadata], page: int, page_size: int) -> MetadataPage:
    """Slice one page out of the records, clamping the page number."""
    total = len(records)
    total_pages = max(1, math.ceil(total / page_size))
    page = min(max(page, 1), total_pages)

    start = (page - 1) * page_size
    end = min(start + page_size, total)

    return MetadataPage(
        items=list(records[start:end]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        start_index=start + 1 if total else 0,
        end_index=end,
    )


def query_metadata(records: Sequence[ProposalMetadata], query: MetadataQuery) -> MetadataPage:
    """Apply filters, then sorting, then pagination."""
    filtered = filter_metadata(records, query.filters)
    ordered = sort_metadata(filtered, query.sort_key, query.direction)
    return paginate(ordered, query.page, query.page_size)
