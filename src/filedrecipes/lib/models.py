from dataclasses import dataclass, field


@dataclass
class Ingredient:
    amount: str
    measure: str
    name: str

    def __str__(self) -> str:
        return f"{self.amount} {self.measure} {self.name}"


@dataclass
class Recipe:
    """A named recipe with ingredients and instructions in file order.

    Equality is by value: two recipes are equal when their names, ingredients
    and instructions all match, in order.
    """

    name: str
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("A recipe must have a name.")

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def copy(self) -> "Recipe":
        """Return a deep copy sharing no lists or ingredients with self."""
        return Recipe(
            self.name,
            [Ingredient(i.amount, i.measure, i.name) for i in self.ingredients],
            list(self.instructions),
        )
