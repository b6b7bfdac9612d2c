from typing import List, Optional

from depwire.domain.enums import DefinitionKind


class DIException(Exception):
    """Base exception for DI-related errors."""


class DuplicateNameError(DIException):
    """Raised when a name is registered twice in the same container.

    Attributes:
        name: The name that was already registered.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate dependency found: {name}")


class NotFoundError(DIException):
    """Raised when a name is not registered in the container.

    Attributes:
        name: The name that could not be found.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Container cannot find user module: {name}")


class WrongKindError(DIException):
    """Raised when a registered definition is not of the requested kind.

    This occurs when:
    - Requesting the class of a constant.
    - Requesting the class of a pre-made function.
    - Requesting the class of a factory.

    Attributes:
        name: The registered name.
        kind: The actual kind of the registered definition.
        expected: The kind the caller asked for.
    """

    def __init__(self, name: str, kind: DefinitionKind, expected: DefinitionKind = DefinitionKind.CLASS) -> None:
        self.name = name
        self.kind = kind
        self.expected = expected
        super().__init__(f"Cannot return {expected} for dependency, it is a {kind}: {name}")


class ExternalModuleNotFoundError(DIException):
    """Raised when no name variant resolves through the module provider.

    Attributes:
        name: The requested name, external prefix already stripped.
        attempted: Every candidate name that was tried, in order.
    """

    def __init__(self, name: str, attempted: Optional[List[str]] = None) -> None:
        self.name = name
        self.attempted = list(attempted or [])
        message = f"Container could not find external module: {name}"
        if self.attempted:
            message += f" (tried: {', '.join(self.attempted)})"
        super().__init__(message)
