"""Models for nutrition estimation results."""

from typing import Literal

from pydantic import BaseModel, Field

from wellness_log.domain.records import NUTRIENT_FIELDS, Nutrients


class MealEstimate(BaseModel):
    """Structured output of the nutrition estimator for one meal."""

    meal_name: str
    calories: float = Field(default=0.0, ge=0.0)
    protein_g: float = Field(default=0.0, ge=0.0)
    carbs_g: float = Field(default=0.0, ge=0.0)
    fat_g: float = Field(default=0.0, ge=0.0)
    fibre_g: float = Field(default=0.0, ge=0.0)
    sugar_g: float = Field(default=0.0, ge=0.0)
    saturated_fat_g: float = Field(default=0.0, ge=0.0)
    trans_fat_g: float = Field(default=0.0, ge=0.0)
    cholesterol_mg: float = Field(default=0.0, ge=0.0)
    sodium_mg: float = Field(default=0.0, ge=0.0)
    potassium_mg: float = Field(default=0.0, ge=0.0)
    calcium_mg: float = Field(default=0.0, ge=0.0)
    iron_mg: float = Field(default=0.0, ge=0.0)
    magnesium_mg: float = Field(default=0.0, ge=0.0)
    phosphorus_mg: float = Field(default=0.0, ge=0.0)
    zinc_mg: float = Field(default=0.0, ge=0.0)
    vitamin_a_ug: float = Field(default=0.0, ge=0.0)
    vitamin_c_mg: float = Field(default=0.0, ge=0.0)
    vitamin_d_ug: float = Field(default=0.0, ge=0.0)
    vitamin_e_mg: float = Field(default=0.0, ge=0.0)
    vitamin_k_ug: float = Field(default=0.0, ge=0.0)
    vitamin_b12_ug: float = Field(default=0.0, ge=0.0)
    vitamin_b6_mg: float = Field(default=0.0, ge=0.0)
    folate_ug: float = Field(default=0.0, ge=0.0)
    confidence_score: int = Field(ge=1, le=100)
    quality_score: float = Field(ge=1.0, le=10.0)
    quality_label: Literal["Excellent", "Good", "Average", "Poor"]
    main_ingredients: list[str] = Field(default_factory=list)
    notes: str = ""

    def nutrients(self) -> Nutrients:
        """Return the nutrient vector as a domain value."""
        return Nutrients(**{name: getattr(self, name) for name in NUTRIENT_FIELDS})
