"""
Response envelope — the ``subsonic-response`` wrapper around every reply.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorRecord(BaseModel):
    code: int
    message: str = ""


class SubsonicResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None     # "ok" | "failed"
    version: Optional[str] = None
    error: Optional[ErrorRecord] = None


class Envelope(BaseModel):
    response: SubsonicResponse = Field(alias="subsonic-response")
