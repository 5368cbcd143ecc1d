from pydantic import BaseModel, ConfigDict


class MealPlan(BaseModel):
    meals: list[str]
    calories: int
    protein: int    # grams

    # exactly these three keys, no coercion ("2000" or true is not an int)
    model_config = ConfigDict(extra="forbid", strict=True)
