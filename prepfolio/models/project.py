"""
Project models for Prepfolio

A project is the subject of a rehearsal: the candidate explains it,
the provider asks about it and scores the explanation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProjectContext(BaseModel):
    """Project metadata supplied by the caller. Read-only to the providers."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    name: str = ""
    description: str | None = None
    problem: str | None = None
    solution: str | None = None
    architecture: str | None = None
    challenges: str | None = None
    tech_stack: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value):
        return "" if value is None else value

    @field_validator("tech_stack", mode="before")
    @classmethod
    def _stack_or_empty(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value
