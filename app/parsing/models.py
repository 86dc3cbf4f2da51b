from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParsedDoc(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    source_type: str
    text: str
    page_count: int = Field(default=1, ge=1)
    parsing_warnings: list[str] = Field(default_factory=list)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx"}:
            raise ValueError("source_type must be one of: pdf, docx")
        return normalized
