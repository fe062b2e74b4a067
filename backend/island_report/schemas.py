"""Pydantic models for the externally consumed report document."""

from pydantic import BaseModel, ConfigDict, Field

from .models import Verdict


class CollectedLine(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    res: str
    amount: int = Field(ge=0)


class SessionReportDocument(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, use_enum_values=True)

    collected: list[CollectedLine] = Field(default_factory=list)
    visited: int = Field(ge=0)
    scanned: int = Field(ge=0)
    contractMax: int = Field(ge=0)
    result: Verdict
    initial: int
    remaining: int
    stats: dict[str, str] = Field(default_factory=dict)
    size: int
    ms: int | None = Field(default=None, ge=0)
