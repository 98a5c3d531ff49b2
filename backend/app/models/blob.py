"""Blob generation request / result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.svg.animation import MAX_FRAMES


class BlobRequest(BaseModel):
    complexity: int = Field(default=8, ge=3, description="Points per ring")
    contrast: float = Field(default=20.0, ge=0, description="Radius perturbation magnitude")
    frames: int = Field(default=20, ge=1, le=MAX_FRAMES, description="Frames in the morph animation")
    seed: int | None = Field(default=None, description="Seed for reproducible shapes")
    precision: int | None = Field(default=2, ge=0, le=12, description="Decimals in path data")


class BlobResult(BaseModel):
    complexity: int
    contrast: float
    seed: int | None = None
    paths: list[str] = Field(default_factory=list)
    key_times: list[str] = Field(default_factory=list)
    static_svg: str = ""
    animated_svg: str = ""
    keyframes_css: str = ""
