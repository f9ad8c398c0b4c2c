"""Document models for the proposal corpus."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNTITLED = "Untitled"


class ProposalMetadata(BaseModel):
    """Front matter of a single proposal record."""
    
    model_config = ConfigDict(frozen=True, extra="ignore")
    
    id: Optional[int] = Field(None, description="Numeric program identifier")
    proposal_type: Optional[str] = Field(None, description="Proposal type, e.g. GO or GTO")
    cycle: Optional[str] = Field(None, description="Observing cycle")
    exclusive_access_period_months: Optional[int] = Field(
        None, description="Exclusive access period in months"
    )
    instrument_mode: Optional[str] = Field(None, description="Instrument and observing mode")
    pi_and_co_pis: Optional[str] = Field(None, description="Principal and co-investigators")
    prime_parallel_time_hours: Optional[str] = Field(
        None, description="Prime/parallel time in hours, may be a range"
    )
    program_title: Optional[str] = Field(None, description="Program title")
    type: Optional[str] = Field(None, description="Category code")

    @field_validator(
        "proposal_type",
        "cycle",
        "instrument_mode",
        "pi_and_co_pis",
        "prime_parallel_time_hours",
        "program_title",
        "type",
        mode="before",
    )
    @classmethod
    def coerce_scalar_to_text(cls, v: Any) -> Optional[str]:
        """YAML hands back ints and floats for values like ``cycle: 4``."""
        if v is None:
            return None
        if isinstance(v, (list, dict)):
            raise ValueError("Expected a scalar value")
        return str(v)

    def id_text(self) -> str:
        """Display form of the program id, empty when missing."""
        return "" if self.id is None else str(self.id)


class Document(BaseModel):
    """A parsed corpus record."""
    
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(..., description="Source name, unique across the store")
    title: str = Field(default=UNTITLED, description="Human readable title")
    content: str = Field(default="", description="Markdown body")
    metadata: ProposalMetadata = Field(default_factory=ProposalMetadata)
