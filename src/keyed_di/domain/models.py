from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyed_di.domain.exceptions import CircularDependencyError, InvalidArgumentError


class Entry(BaseModel):
    """Reference to another container entry, used inside definition parameters.

    Wherever an ``Entry`` appears in a parameter list, an action argument or a
    nested list/dict, it is replaced by the resolved container entry at build time.

    Attributes:
        id: Identifier of the referenced entry.

    Example:
        >>> Entry("database")
        Entry('database')
        >>> str(Entry("database"))
        'database'
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier of the referenced container entry.")

    def __init__(self, id: str) -> None:
        super().__init__(id=id)

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: object) -> str:
        if not isinstance(value, str) or value == "":
            raise InvalidArgumentError("Entry identifier must be a non-empty string")
        return value

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Entry({self.id!r})"


class ResolutionContext(BaseModel):
    """Tracks the identifiers a container is currently building.

    Used for circular dependency detection.

    Attributes:
        stack: Identifiers currently being built, outermost first.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stack: List[str] = Field(
        default_factory=list,
        description="Stack of identifiers currently being built.",
    )

    def push(self, identifier: str) -> None:
        """Add an identifier to the resolution stack.

        Args:
            identifier: The identifier being built.

        Raises:
            CircularDependencyError: If the identifier is already in the stack.
        """
        if identifier in self.stack:
            cycle = self.stack[self.stack.index(identifier) :] + [identifier]
            raise CircularDependencyError(cycle)
        self.stack.append(identifier)

    def pop(self) -> None:
        """Remove the most recent identifier from the stack."""
        if self.stack:
            self.stack.pop()

    def clear(self) -> None:
        """Clear the entire resolution stack."""
        self.stack.clear()
