from typing import Any, Optional
from pydantic import BaseModel, Field

from pantry.lib.models import Recipe


class RecipeIn(BaseModel):
    name: str = Field(min_length=1)
    ingredients: list[str]


class RecipeUpdate(RecipeIn):
    id: Optional[str] = None


class RecipeOut(BaseModel):
    id: str
    name: str
    ingredients: list[str]

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeOut":
        return cls(id=recipe.id, name=recipe.name, ingredients=recipe.ingredients)


class ErrorResponse(BaseModel):
    code: str
    errors: Optional[list[dict[str, Any]]] = None
