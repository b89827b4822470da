"""Request/record schemas shared by the CLI and the HTTP service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class FindingRecord(BaseModel):
    """A scanner finding as read from JSON. Unknown fields are passed through."""

    model_config = ConfigDict(extra="allow")

    match: str
    line_text: Optional[str] = None
