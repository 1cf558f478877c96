from dataclasses import dataclass, field, replace


@dataclass
class Recipe:
    id: str
    name: str
    ingredients: list[str] = field(default_factory=list)

    def copy(self) -> "Recipe":
        return replace(self, ingredients=list(self.ingredients))
