from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

from filedrecipes.lib.errors import FormatError, LoadError, RecipeIndexError, SaveError
from filedrecipes.lib.repository import RecipeRepository
from filedrecipes.lib.view import render, render_all
from filedrecipes.web.models import RecipeListResponse, RecipeModel, StatusResponse

router = APIRouter()


def get_repository(request: Request) -> RecipeRepository:
    return request.app.state.repository


@router.get("/status", response_model=StatusResponse)
def get_status(repository: RecipeRepository = Depends(get_repository)):
    return StatusResponse(
        path=str(repository.path),
        count=len(repository),
        is_modified=repository.is_modified,
    )


@router.get("/recipes", response_model=RecipeListResponse)
def list_recipes(repository: RecipeRepository = Depends(get_repository)):
    recipes = [RecipeModel.from_recipe(r) for r in repository.get_all()]
    return RecipeListResponse(recipes=recipes)


@router.post("/recipes", response_model=RecipeModel, status_code=201)
def create_recipe(
    body: RecipeModel, repository: RecipeRepository = Depends(get_repository)
):
    recipe = body.to_recipe()
    try:
        repository.add(recipe)
    except SaveError as exc:
        if isinstance(exc.__cause__, FormatError):
            raise HTTPException(422, str(exc.__cause__))
        raise HTTPException(500, str(exc))
    return RecipeModel.from_recipe(recipe)


@router.post("/recipes/reload", response_model=StatusResponse)
def reload_recipes(repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.load()
    except LoadError as exc:
        raise HTTPException(500, str(exc))
    return get_status(repository)


@router.get("/recipes/text", response_class=PlainTextResponse)
def list_recipes_text(repository: RecipeRepository = Depends(get_repository)):
    return render_all(repository.get_all())


@router.get("/recipes/{index}", response_model=RecipeModel)
def get_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    try:
        recipe = repository.get_at(index)
    except RecipeIndexError as exc:
        raise HTTPException(404, str(exc))
    return RecipeModel.from_recipe(recipe)


@router.get("/recipes/{index}/text", response_class=PlainTextResponse)
def get_recipe_text(
    index: int, repository: RecipeRepository = Depends(get_repository)
):
    try:
        recipe = repository.get_at(index)
    except RecipeIndexError as exc:
        raise HTTPException(404, str(exc))
    return render(recipe)


@router.delete("/recipes/{index}", status_code=204)
def delete_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.delete(index)
    except RecipeIndexError as exc:
        raise HTTPException(404, str(exc))
    return Response(status_code=204)
