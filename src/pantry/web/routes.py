from fastapi import APIRouter, Depends, Request, Response, status

from pantry.lib.errors import ValidationError
from pantry.lib.store import RecipeStore
from pantry.web.models import ErrorResponse, RecipeIn, RecipeOut, RecipeUpdate

router = APIRouter(prefix="/recipes", tags=["recipes"])


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store


@router.get("", response_model=list[RecipeOut])
def list_recipes(store: RecipeStore = Depends(get_store)):
    return [RecipeOut.from_recipe(recipe) for recipe in store.list()]


@router.post(
    "",
    response_model=RecipeOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_recipe(body: RecipeIn, store: RecipeStore = Depends(get_store)):
    recipe = store.create(body.name, body.ingredients)
    return RecipeOut.from_recipe(recipe)


@router.put(
    "/{recipe_id}",
    response_model=RecipeOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_recipe(
    recipe_id: str, body: RecipeUpdate, store: RecipeStore = Depends(get_store)
):
    if body.id is not None and body.id != recipe_id:
        raise ValidationError(field="id", path_id=recipe_id, body_id=body.id)

    recipe = store.update(recipe_id, body.name, body.ingredients)
    return RecipeOut.from_recipe(recipe)


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)):
    store.delete(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
