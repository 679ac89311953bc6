# This file defines request and response schemas for club endpoints.

from __future__ import annotations

from pydantic import BaseModel, Field


class ClubCreateRequest(BaseModel):
    club_name: str = Field(min_length=1)


class ClubRow(BaseModel):
    id: int
    club_name: str
