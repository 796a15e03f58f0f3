from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    system_name: str = "CTEST"
    poison: bool = True

    @field_validator("system_name")
    @classmethod
    def system_name_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("system_name must not be empty")
        return v


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a suite config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    return SuiteConfig(**(raw or {}))
