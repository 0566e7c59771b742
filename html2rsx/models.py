"""Pydantic models for batch conversion plans."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .io_utils import warn


class ConversionJob(BaseModel):
    """One HTML file to convert and where to write the result."""

    input: Path = Field(..., description="HTML file to convert.")
    output: Path = Field(..., description="File that receives the rsx text.")
    wrap: Literal["none", "rsx", "component"] = Field(
        "none", description="How to wrap the converted body."
    )
    component_name: Optional[str] = Field(
        None,
        alias="componentName",
        pattern=r"^[A-Z][A-Za-z0-9_]*$",
        description="Function name used when wrap is 'component'.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @model_validator(mode="after")
    def _component_needs_name(self) -> "ConversionJob":
        if self.wrap == "component" and not self.component_name:
            raise ValueError("componentName is required when wrap is 'component'")
        return self


class ConversionPlan(BaseModel):
    """A list of conversions loaded from YAML."""

    base_dir: Optional[Path] = Field(
        None,
        alias="baseDir",
        description="Directory job paths are relative to; defaults to the plan's directory.",
    )
    jobs: List[ConversionJob] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def resolve(self, path: Path) -> Path:
        if path.is_absolute() or self.base_dir is None:
            return path
        return self.base_dir / path


def load_plan(path: Path) -> ConversionPlan:
    """Load and validate a YAML conversion plan, exiting on invalid input."""
    if not path.exists():
        raise SystemExit(f"Plan file not found: {path}")

    payload: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise SystemExit(f"{path} must contain a mapping with a 'jobs' list.")

    jobs_payload = payload.get("jobs") or []
    if not isinstance(jobs_payload, list):
        raise SystemExit(f"{path}: 'jobs' must be a list.")

    jobs: list[ConversionJob] = []
    errors: list[str] = []
    for index, item in enumerate(jobs_payload, start=1):
        try:
            jobs.append(ConversionJob.model_validate(item))
        except ValidationError as exc:
            errors.append(f"{path} job {index}: {exc}")

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    try:
        plan = ConversionPlan.model_validate({**payload, "jobs": jobs})
    except ValidationError as exc:
        raise SystemExit(f"Invalid conversion plan in {path}: {exc}") from exc

    base_dir = plan.base_dir
    if base_dir is None:
        base_dir = path.parent
    elif not base_dir.is_absolute():
        base_dir = path.parent / base_dir
    return plan.model_copy(update={"base_dir": base_dir})


__all__ = ["ConversionJob", "ConversionPlan", "load_plan"]
