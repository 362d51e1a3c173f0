"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class ViewportConfig(BaseModel):
    min_size: float = Field(100.0, gt=0)
    padding: float = Field(0.1, ge=0)
    stroke_divisor: float = Field(1000.0, gt=0)


class FormatConfig(BaseModel):
    precision: int | None = Field(6, ge=0)
    stroke_color: str = "black"


class Config(BaseModel):
    viewport: ViewportConfig = ViewportConfig()
    format: FormatConfig = FormatConfig()

    @classmethod
    def load(cls, path: str | Path = "configs/export.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "configs/export.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
