"""
Pydantic schemas for ordered list actions.
"""

from typing import List, Literal, Union

from pydantic import BaseModel, Field


class MoveRequest(BaseModel):
    direction: Literal["higher", "lower", "top", "bottom"]


class InsertAtRequest(BaseModel):
    position: int = Field(1, ge=1, description="1-based target position")


class ReorderRequest(BaseModel):
    """Target order; ids may be numbers or strings from a sortable widget."""

    ids: List[Union[int, str]] = Field(..., min_length=1)


class MoveResult(BaseModel):
    moved: bool
    position: Union[int, None] = None
