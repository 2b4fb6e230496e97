"""Core data models for findurls."""

from typing import NamedTuple, Optional
from pydantic import BaseModel, ConfigDict


class Candidate(NamedTuple):
    """A raw pattern match and its offset in the source text."""

    text: str
    index: int


class ProtocolResolution(BaseModel):
    """How a candidate gets its protocol.

    ``resolved_protocol`` is None when no protocol is available, in which
    case the candidate is rejected.
    """

    model_config = ConfigDict(frozen=True)

    has_protocol: bool
    resolved_protocol: Optional[str] = None
    is_default_protocol: bool = False


class UrlMatch(BaseModel):
    """A URL found in text."""

    model_config = ConfigDict(frozen=True)

    raw: str  # trimmed match, as written
    normalized: str  # absolute URL serialized by the parser
    index: int  # offset of raw in the input text

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for JSON output."""
        return {
            "raw": self.raw,
            "normalized": self.normalized,
            "index": self.index,
        }
