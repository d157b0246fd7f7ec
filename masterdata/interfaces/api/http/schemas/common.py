"""
===============================================================================
CRC CARD — schemas/common.py
===============================================================================

Module:
    Shared HTTP schema pieces

Responsibilities:
    - Base request model that keeps "absent" and "null" apart
      (model_dump(exclude_unset=True)) and rejects unknown keys.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict

# Form inputs arrive either as strings (text boxes) or as JSON natives.
# Parsing is left to application.normalization so both shapes behave alike.
TextIn = Union[str, None]
NumberIn = Union[int, float, str, None]
BoolIn = Union[bool, str, None]


class PatchModel(BaseModel):
    """Request base: only keys the client actually sent reach the use case."""

    model_config = ConfigDict(extra="forbid")

    def to_raw(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

