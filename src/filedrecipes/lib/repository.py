import logging
from pathlib import Path
from typing import Callable, Union

from filedrecipes.lib import codec
from filedrecipes.lib.errors import (
    FormatError,
    LoadError,
    RecipeIndexError,
    SaveError,
)
from filedrecipes.lib.models import Recipe

logger = logging.getLogger(__name__)

ChangeHandler = Callable[[], None]


class RecipeRepository:
    """Holds the recipes of one recipe file.

    The repository owns its list of recipes. Everything handed out is a deep
    copy, so callers change the collection only through delete and append.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).resolve()
        self._recipes: list[Recipe] = []
        self._handlers: list[ChangeHandler] = []
        self._is_modified = False

    def __len__(self) -> int:
        return len(self._recipes)

    @property
    def is_modified(self) -> bool:
        return self._is_modified

    def subscribe(self, handler: ChangeHandler) -> ChangeHandler:
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: ChangeHandler) -> None:
        self._handlers.remove(handler)

    def _notify(self) -> None:
        for handler in list(self._handlers):
            handler()

    def load(self) -> None:
        try:
            # utf-8-sig drops the byte order mark some editors write.
            with open(self.path, encoding="utf-8-sig") as f:
                recipes = codec.parse(f)
        except (OSError, UnicodeDecodeError, FormatError) as exc:
            logger.warning("Failed to load recipes from %s: %s", self.path, exc)
            raise LoadError(f"Could not load {self.path}: {exc}") from exc

        self._recipes = recipes
        self._is_modified = False
        logger.info("Loaded %d recipes from %s", len(recipes), self.path)
        self._notify()

    def save(self, recipe: Recipe) -> None:
        """Append one recipe to the end of the file.

        The in-memory collection is left alone; use append for that, or add
        for both.
        """
        self._write(recipe)
        self._is_modified = True
        self._notify()

    def add(self, recipe: Recipe) -> None:
        """Save a recipe to the file, then append it, notifying once."""
        self._write(recipe)
        self._insert(recipe)
        self._is_modified = True
        self._notify()

    def get_all(self) -> list[Recipe]:
        return [r.copy() for r in self._recipes]

    def get_at(self, index: int) -> Recipe:
        return self._recipes[self._check_index(index)].copy()

    def append(self, recipe: Recipe) -> None:
        self._insert(recipe)
        self._is_modified = True
        self._notify()

    def _write(self, recipe: Recipe) -> None:
        try:
            text = codec.dumps([recipe])
            with open(self.path, "a", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except (OSError, FormatError) as exc:
            logger.warning("Failed to save %r to %s: %s", recipe.name, self.path, exc)
            raise SaveError(f"Could not save {recipe.name!r}: {exc}") from exc
        logger.info("Saved %r to %s", recipe.name, self.path)

    def _insert(self, recipe: Recipe) -> None:
        self._recipes.append(recipe.copy())
        logger.debug("Appended %r", recipe.name)

    def delete(self, recipe: Union[Recipe, int]) -> None:
        if isinstance(recipe, int):
            recipe = self._recipes[self._check_index(recipe)]

        position = self._find(recipe)
        if position is None:
            return

        removed = self._recipes.pop(position)
        self._is_modified = True
        logger.debug("Deleted %r", removed.name)
        self._notify()

    def _find(self, recipe: Recipe) -> Union[int, None]:
        for i, r in enumerate(self._recipes):
            if r is recipe:
                return i
        # A copy handed out earlier; fall back to the first equal recipe.
        for i, r in enumerate(self._recipes):
            if r == recipe:
                return i
        return None

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._recipes):
            raise RecipeIndexError(
                f"No recipe at index {index} ({len(self._recipes)} recipes)"
            )
        return index
