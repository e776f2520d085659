from typing import Iterable

from filedrecipes.lib.models import Recipe


def render(recipe: Recipe) -> str:
    frame = "=" * (len(recipe.name) + 4)
    lines = [frame, f"  {recipe.name}", frame, ""]

    lines += ["Ingredienser", "============"]
    lines += [str(ingredient) for ingredient in recipe.ingredients]
    lines.append("")

    lines += ["Gör så här", "=========="]
    for i, instruction in enumerate(recipe.instructions, start=1):
        lines += [f"<{i}>", instruction]

    return "\n".join(lines) + "\n"


def render_all(recipes: Iterable[Recipe]) -> str:
    return "\n".join(render(r) for r in recipes)
