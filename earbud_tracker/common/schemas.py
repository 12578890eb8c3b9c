from typing import Optional

from pydantic import BaseModel, field_validator


class SearchParams(BaseModel):
    brand: Optional[str] = ""
    color: Optional[str] = ""

    @field_validator("brand", "color", mode="before")
    @classmethod
    def _blank_when_missing(cls, value):
        return "" if value is None else value

    @property
    def brand_filter(self) -> str:
        return self.brand.lower()

    @property
    def color_filter(self) -> str:
        return self.color.lower()
