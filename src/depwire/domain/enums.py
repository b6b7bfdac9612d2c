from enum import Enum


class DefinitionKind(str, Enum):
    """Defines how a registered name produces its value.

    Attributes:
        CLASS: A class instantiated with its constructor dependencies.
        CONSTANT: A value returned verbatim.
        FUNCTION: A callable returned verbatim, never invoked by the container.
        FACTORY: A callable invoked with the container on every resolution.
    """

    CLASS = "class"
    CONSTANT = "constant"
    FUNCTION = "function"
    FACTORY = "factory"

    def __str__(self) -> str:
        return self.value
