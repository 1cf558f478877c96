from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, Optional

from pantry.lib.errors import NotFoundError, ValidationError
from pantry.lib.models import Recipe


class RecipeStore:
    """In-memory recipe collection; each operation runs under one lock."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None) -> None:
        self._lock = threading.Lock()
        self._recipes: list[Recipe] = []
        self._issued: set[str] = set()
        self.logger = logging.getLogger(self.__class__.__name__)

        for recipe in recipes or []:
            if recipe.id in self._issued:
                raise ValidationError(field="id", id=recipe.id, reason="duplicate")
            self._issued.add(recipe.id)
            self._recipes.append(recipe.copy())

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        with self._lock:
            return any(r.id == recipe_id for r in self._recipes)

    def _new_id(self) -> str:
        # ids of deleted recipes stay in _issued and are never handed out again
        while (recipe_id := uuid.uuid4().hex) in self._issued:
            pass
        self._issued.add(recipe_id)
        return recipe_id

    def _index(self, recipe_id: str) -> int:
        for i, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return i
        self.logger.warning(f"No recipe with id {recipe_id!r}")
        raise NotFoundError(id=recipe_id)

    def get(self, recipe_id: str) -> Recipe:
        with self._lock:
            return self._recipes[self._index(recipe_id)].copy()

    def create(self, name: str, ingredients: list[str]) -> Recipe:
        with self._lock:
            recipe = Recipe(id=self._new_id(), name=name, ingredients=list(ingredients))
            self._recipes.append(recipe)
            self.logger.info(f"Created recipe {recipe.id!r} ({name!r})")
            return recipe.copy()

    def update(self, recipe_id: str, name: str, ingredients: list[str]) -> Recipe:
        with self._lock:
            recipe = self._recipes[self._index(recipe_id)]
            recipe.name = name
            recipe.ingredients = list(ingredients)
            self.logger.info(f"Updated recipe {recipe_id!r}")
            return recipe.copy()

    def delete(self, recipe_id: str) -> None:
        with self._lock:
            del self._recipes[self._index(recipe_id)]
            self.logger.info(f"Deleted recipe {recipe_id!r}")

    def list(self) -> list[Recipe]:
        with self._lock:
            return [recipe.copy() for recipe in self._recipes]
