# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import List, Optional
from pydantic import BaseModel, Field

# Request fields are all optional: missing values are reported by the
# service layer as 400s with a readable message.


class WaitlistRequest(BaseModel):
    email: Optional[str] = Field(default=None, examples=["user@example.com"])
    source: Optional[str] = Field(default=None, examples=["landing-page"])


class ThoughtRequest(BaseModel):
    email: Optional[str] = Field(default=None, examples=["user@example.com"])
    message: Optional[str] = Field(default=None, examples=["Would love a dark mode for the dashboard."])
    source: Optional[str] = Field(default=None, examples=["landing-page"])


class SubmitResponse(BaseModel):
    success: bool = True
    message: str


class WaitlistSubmitResponse(SubmitResponse):
    count: int


class CountResponse(BaseModel):
    success: bool = True
    count: int


class WaitlistItem(BaseModel):
    email: str
    timestamp: str
    source: str


class ThoughtItem(BaseModel):
    email: Optional[str] = None
    message: str
    timestamp: str
    source: str


class WaitlistListResponse(CountResponse):
    data: List[WaitlistItem]


class ThoughtListResponse(CountResponse):
    data: List[ThoughtItem]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
