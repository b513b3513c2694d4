from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @property
    def key(self) -> tuple[str, str]:
        return (self.first_name, self.last_name)


class ErrorResponse(BaseModel):
    detail: str
    kind: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
