"""
Pydantic schemas for job definitions loaded from JSON files.

These are NOT the scheduler's Job type — they describe what a user writes
in a jobs file for the demo driver:
- JobSpec: one job (id, description, priority)
- JobBatch: a list of JobSpecs, in submission order

A file may hold either a bare list or an object with a "jobs" key.
Arrival times are never read from the file; the JobFactory assigns them
in the order the jobs appear.
"""

from typing import Union

from pydantic import BaseModel, Field, field_validator


class JobSpec(BaseModel):
    """One job definition. `id` is kept opaque: any int or string."""

    id: Union[int, str]
    description: str = Field(
        default="",
        max_length=255,
        examples=["Urgent bug fix"],
    )
    priority: int = Field(
        ...,
        description="Lower number = served earlier. Negative values allowed.",
    )


class JobBatch(BaseModel):
    jobs: list[JobSpec]

    @field_validator("jobs")
    @classmethod
    def _ids_are_unique(cls, jobs: list[JobSpec]) -> list[JobSpec]:
        seen = set()
        for spec in jobs:
            if spec.id in seen:
                raise ValueError(f"duplicate job id: {spec.id!r}")
            seen.add(spec.id)
        return jobs

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "JobBatch":
        """
        Parse either `[...]` or `{"jobs": [...]}`.

        Bytes are decoded by pydantic, so invalid UTF-8 surfaces as a
        ValidationError like any other malformed input.
        """
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        if raw.lstrip().startswith(b"["):
            raw = b'{"jobs": ' + raw + b"}"
        return cls.model_validate_json(raw)
