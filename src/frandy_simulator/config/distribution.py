"""Prospective brand distribution by store-count bracket."""

from pydantic import BaseModel, Field

from frandy_simulator.config.brackets import Bracket


class BracketDistribution(BaseModel):
    """Brands expected in one bracket."""

    bracket: Bracket
    brand_count: int = Field(default=0, ge=0, description="Prospective brands in this bracket")
    avg_stores_per_brand: int = Field(
        default=0, ge=0,
        description="Average stores per brand — used for store-count breakdowns only",
    )

    @property
    def store_count(self) -> int:
        return self.brand_count * self.avg_stores_per_brand
