from pathlib import Path

import pytest

from filedrecipes.lib.repository import RecipeRepository

PANNKAKOR = """\
[Recept]
Pannkakor
[Ingredienser]
3;dl;mjölk
2;st;ägg
[Instruktioner]
Blanda allt.
Stek i smör.
"""

TWO_RECIPES = """\
[Recept]
Våfflor
[Ingredienser]
3;dl;vetemjöl
[Instruktioner]
Grädda i våffeljärn.

[Recept]
Kanelbullar
[Ingredienser]
25;g;jäst
1;tsk;kanel
[Instruktioner]
Knåda degen.
"""


@pytest.fixture
def recipe_file(tmp_path: Path) -> Path:
    path = tmp_path / "recipes.txt"
    path.write_text(PANNKAKOR, encoding="utf-8")
    return path


@pytest.fixture
def repository(recipe_file: Path) -> RecipeRepository:
    repo = RecipeRepository(recipe_file)
    repo.load()
    return repo
