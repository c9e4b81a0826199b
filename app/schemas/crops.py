"""Pydantic schemas for the crop reference dataset."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CropRecordRead(BaseModel):
	model_config = ConfigDict(from_attributes=True)

	crop_label: str
	temperature: float
	humidity: float
	ph: float
	rainfall: float
	nitrogen: float
	phosphorus: float
	potassium: float


class CropDatasetRead(BaseModel):
	count: int
	items: list[CropRecordRead] = Field(default_factory=list)
