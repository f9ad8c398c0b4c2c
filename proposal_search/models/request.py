"""Request models for API endpoints."""

from typing import List, Union

from pydantic import BaseModel, Field


class CrossMatchRequest(BaseModel):
    """Request model for a batch cross-match.

    ``terms`` is either the raw comma-separated text a user pasted or an
    already split list. Blank terms are dropped by the engine, so an empty
    batch is valid and yields no rows.
    """
    
    terms: Union[List[str], str] = Field(..., description="Comma-separated terms or a list of terms")
    delimiter: str = Field(default=",", min_length=1, max_length=5, description="Term delimiter for raw text")
