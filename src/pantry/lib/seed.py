from pantry.lib.store import RecipeStore

SAMPLE_RECIPES: list[tuple[str, list[str]]] = [
    ("boiled white rice", ["1 cup white rice", "2 cups water", "pinch of salt"]),
    ("milkshake", ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"]),
]


def seed_store(store: RecipeStore) -> None:
    for name, ingredients in SAMPLE_RECIPES:
        store.create(name, ingredients)
