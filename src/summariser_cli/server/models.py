from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class SummariseRequest(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    translate: bool = True


class SummariseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    translated_summary: Optional[str] = Field(None, alias="translatedSummary")
    original_length: int = Field(alias="originalLength")
    summary_length: int = Field(alias="summaryLength")


class ErrorResponse(BaseModel):
    error: str


class SummaryRow(BaseModel):
    id: int
    source_id: Optional[int] = None
    url: Optional[str] = None
    summary: str
    translated_summary: Optional[str] = None
    original_length: int
    summary_length: int
    created_at: str
