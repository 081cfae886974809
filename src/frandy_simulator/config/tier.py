"""Product tier — per-bracket price table and launch month."""

from pydantic import BaseModel, Field, NonNegativeInt

from frandy_simulator.config.brackets import Bracket, TierId


class Tier(BaseModel):
    """One pricing package.

    ``launch_month`` is when the tier's feature set becomes sellable.
    The tier is dormant in every month strictly before it; a value above
    12 means the tier never activates within the projected year.
    """

    id: TierId
    modules: list[str] = Field(default_factory=list, description="Feature modules bundled in the tier")
    price_by_bracket: dict[Bracket, NonNegativeInt] = Field(
        default_factory=dict,
        description="Monthly subscription price per brand, by bracket (KRW). "
                    "Missing brackets are priced at 0.",
    )
    launch_month: int = Field(default=1, ge=1, description="Calendar month the tier launches (1-indexed)")

    def price(self, bracket: Bracket) -> int:
        return self.price_by_bracket.get(bracket, 0)

    def price_per_store(self, bracket: Bracket, avg_stores: int) -> int:
        """Monthly price divided across a brand's stores."""
        if avg_stores <= 0:
            return 0
        return int(self.price(bracket) / avg_stores + 0.5)

    def scaled(self, multiplier: float) -> "Tier":
        """Copy with every bracket price scaled and rounded half-up."""
        prices = {b: int(p * multiplier + 0.5) for b, p in self.price_by_bracket.items()}
        return self.model_copy(update={"price_by_bracket": prices})
