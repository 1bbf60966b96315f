"""
Viewer settings, read from the environment (and a .env file via the CLI).
"""

import os
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


_TRUTHY = {"1", "true", "yes", "on"}


class ViewerSettings(BaseModel):
    """Settings shared by the render and show commands."""

    output_dir: Path = Field(default=Path("output"), description="Directory for rendered HTML")
    title: Optional[str] = Field(default=None, description="Page title override")
    ratio: str = Field(default="16:9", description="Slide aspect ratio W:H")
    show_notes: bool = Field(default=False, description="Show presenter notes in the terminal viewer")

    @field_validator("ratio")
    @classmethod
    def validate_ratio(cls, v: str) -> str:
        match = re.fullmatch(r"\s*(\d+)\s*:\s*(\d+)\s*", v)
        if not match or int(match.group(1)) == 0 or int(match.group(2)) == 0:
            raise ValueError(f"Invalid ratio {v!r}: expected W:H, e.g. 16:9")
        return f"{int(match.group(1))}:{int(match.group(2))}"

    @classmethod
    def from_env(cls) -> "ViewerSettings":
        """Build settings from SLIDENAV_* environment variables."""
        values = {}
        if os.getenv("SLIDENAV_OUTPUT_DIR"):
            values["output_dir"] = Path(os.getenv("SLIDENAV_OUTPUT_DIR"))
        if os.getenv("SLIDENAV_TITLE"):
            values["title"] = os.getenv("SLIDENAV_TITLE")
        if os.getenv("SLIDENAV_RATIO"):
            values["ratio"] = os.getenv("SLIDENAV_RATIO")
        if os.getenv("SLIDENAV_SHOW_NOTES"):
            values["show_notes"] = os.getenv("SLIDENAV_SHOW_NOTES", "").strip().lower() in _TRUTHY
        return cls(**values)
