from typing import Optional


class RecipeError(Exception):
    pass


class FormatError(RecipeError):
    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)


class LoadError(RecipeError):
    pass


class SaveError(RecipeError):
    pass


class RecipeIndexError(RecipeError, IndexError):
    pass
