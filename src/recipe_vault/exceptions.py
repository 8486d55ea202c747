"""Exceptions raised by the recipe vault core."""


class RecipeVaultError(Exception):
    """Base class for recipe vault errors."""


class DuplicateNameError(RecipeVaultError):
    """Raised when an ingredient name already exists in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Ingredient '{name}' already exists in the catalog")
        self.name = name


class NotFoundError(RecipeVaultError):
    """Raised when no entry exists for the given id."""

    def __init__(self, kind: str, entry_id: str):
        super().__init__(f"No {kind} with id '{entry_id}'")
        self.kind = kind
        self.entry_id = entry_id


class DuplicateIdError(RecipeVaultError):
    """Raised when an ingredient id is already used by another catalog entry."""

    def __init__(self, entry_id: str):
        super().__init__(f"Ingredient id '{entry_id}' already exists in the catalog")
        self.entry_id = entry_id
