from pydantic import BaseModel, Field

from filedrecipes.lib.models import Ingredient, Recipe


class IngredientModel(BaseModel):
    amount: str = ""
    measure: str = ""
    name: str


class RecipeModel(BaseModel):
    name: str = Field(min_length=1)
    ingredients: list[IngredientModel] = []
    instructions: list[str] = []

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeModel":
        return cls(
            name=recipe.name,
            ingredients=[
                IngredientModel(amount=i.amount, measure=i.measure, name=i.name)
                for i in recipe.ingredients
            ],
            instructions=recipe.instructions,
        )

    def to_recipe(self) -> Recipe:
        return Recipe(
            self.name,
            [Ingredient(i.amount, i.measure, i.name) for i in self.ingredients],
            list(self.instructions),
        )


class RecipeListResponse(BaseModel):
    recipes: list[RecipeModel]


class StatusResponse(BaseModel):
    path: str
    count: int
    is_modified: bool
