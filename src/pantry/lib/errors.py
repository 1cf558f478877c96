from typing import Any


class RecipeStoreError(Exception):
    code = "RECIPE_STORE_ERROR"

    def __init__(self, code: str | None = None, **details: Any):
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(f"{self.code}: {details}" if details else self.code)

    def as_dict(self) -> dict:
        return {"code": self.code, **self.details}


class NotFoundError(RecipeStoreError):
    code = "RECIPE_NOT_FOUND"


class ValidationError(RecipeStoreError):
    code = "VALIDATION_ERROR"
