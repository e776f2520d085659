from enum import Enum
from typing import Iterable

from filedrecipes.lib.errors import FormatError
from filedrecipes.lib.models import Ingredient, Recipe

SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"
SECTIONS = (SECTION_RECIPE, SECTION_INGREDIENTS, SECTION_INSTRUCTIONS)

FIELD_SEPARATOR = ";"


class ReadStatus(Enum):
    """How the next content line will be interpreted."""

    INDEFINITE = "indefinite"
    NEW = "new"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


_SECTION_STATUS = {
    SECTION_RECIPE: ReadStatus.NEW,
    SECTION_INGREDIENTS: ReadStatus.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadStatus.INSTRUCTION,
}


def parse(lines: Iterable[str]) -> list[Recipe]:
    """Parse recipe file lines into recipes sorted by name.

    Names are compared by code point, so "Ärtsoppa" sorts after "Zucchini".
    Raises FormatError on the first line that cannot be classified; nothing
    is returned in that case.
    """
    recipes: list[Recipe] = []
    status = ReadStatus.INDEFINITE

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue

        if line in _SECTION_STATUS:
            status = _SECTION_STATUS[line]
            continue

        if status in (ReadStatus.INGREDIENT, ReadStatus.INSTRUCTION) and not recipes:
            raise FormatError("content before first recipe name", line_number, line)

        if status is ReadStatus.NEW:
            # Every name line starts a recipe, even several under one marker.
            recipes.append(Recipe(line))
        elif status is ReadStatus.INGREDIENT:
            parts = line.split(FIELD_SEPARATOR)
            if len(parts) != 3:
                raise FormatError("malformed ingredient line", line_number, line)
            amount, measure, name = parts
            recipes[-1].add_ingredient(Ingredient(amount, measure, name))
        elif status is ReadStatus.INSTRUCTION:
            recipes[-1].add_instruction(line)
        else:
            raise FormatError(
                "content before first section marker", line_number, line
            )

    return sorted(recipes, key=lambda r: r.name)


def serialize(recipe: Recipe) -> list[str]:
    """Return the section lines for one recipe, without line endings."""
    _check_line(recipe.name, "recipe name")

    lines = [SECTION_RECIPE, recipe.name, SECTION_INGREDIENTS]
    for ingredient in recipe.ingredients:
        fields = [ingredient.amount, ingredient.measure, ingredient.name]
        for value in fields:
            if FIELD_SEPARATOR in value:
                raise FormatError(f"ingredient field contains {FIELD_SEPARATOR!r}")
            _check_text(value, "ingredient field")
        lines.append(FIELD_SEPARATOR.join(fields))

    lines.append(SECTION_INSTRUCTIONS)
    for instruction in recipe.instructions:
        _check_line(instruction, "instruction")
        lines.append(instruction)

    return lines


def loads(text: str) -> list[Recipe]:
    return parse(text.splitlines())


def dumps(recipes: Iterable[Recipe]) -> str:
    return "".join(line + "\n" for r in recipes for line in serialize(r))


def _check_text(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise FormatError(f"{what} contains a line break")


def _check_line(value: str, what: str) -> None:
    if not value:
        raise FormatError(f"{what} is empty")
    if value in SECTIONS:
        raise FormatError(f"{what} is a section marker: {value}")
    _check_text(value, what)
