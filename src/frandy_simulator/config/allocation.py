"""Assignment of bracket brand counts to tiers."""

from pydantic import BaseModel, Field, NonNegativeInt

from frandy_simulator.config.brackets import Bracket, TierId


class TierAllocation(BaseModel):
    """Brands allocated to one tier, per bracket."""

    tier_id: TierId
    count_by_bracket: dict[Bracket, NonNegativeInt] = Field(default_factory=dict)

    def count(self, bracket: Bracket) -> int:
        return self.count_by_bracket.get(bracket, 0)

    @property
    def total(self) -> int:
        return sum(self.count_by_bracket.values())
