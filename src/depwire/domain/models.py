import logging
from typing import Annotated, Any, Callable, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from depwire.domain.enums import DefinitionKind


class ClassDefinition(BaseModel):
    """A class wired from its constructor dependencies.

    Attributes:
        constructible: The class to instantiate.
        dependencies: Dependency names passed positionally, in declared order.
        singleton: Whether the first instance is cached and reused.
        instance: Cached instance, set after the first singleton resolution.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal[DefinitionKind.CLASS] = DefinitionKind.CLASS
    constructible: Type = Field(..., description="The class to instantiate.")
    dependencies: List[str] = Field(
        default_factory=list,
        description="Names resolved and passed positionally to the constructor.",
    )
    singleton: bool = Field(default=True, description="Cache the first instance.")
    instance: Optional[Any] = Field(default=None, description="Cached singleton instance.")

    @property
    def is_instantiated(self) -> bool:
        return self.instance is not None


class ConstantDefinition(BaseModel):
    """An opaque value returned verbatim on every resolution."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal[DefinitionKind.CONSTANT] = DefinitionKind.CONSTANT
    value: Any = Field(..., description="The registered value.")


class FunctionDefinition(BaseModel):
    """A callable returned verbatim, the container never calls it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal[DefinitionKind.FUNCTION] = DefinitionKind.FUNCTION
    function: Callable[..., Any] = Field(..., description="The registered callable.")


class FactoryDefinition(BaseModel):
    """A callable invoked with the container on every resolution."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal[DefinitionKind.FACTORY] = DefinitionKind.FACTORY
    factory: Callable[[Any], Any] = Field(..., description="Builder receiving the container.")


Definition = Annotated[
    Union[ClassDefinition, ConstantDefinition, FunctionDefinition, FactoryDefinition],
    Field(discriminator="kind"),
]


class Registration(BaseModel):
    """Value object pairing a name with its definition.

    Produced by the directory scanner and consumed by the container.

    Attributes:
        name: Fully prefixed name the definition is registered under.
        definition: How the value for the name is produced.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="The name to register.")
    definition: Definition = Field(..., description="The definition to register.")


class ContainerConfig(BaseModel):
    """Immutable container configuration.

    Attributes:
        prefix: Prepended to names registered from scanned units.
        external_module_prefix: Names starting with it skip the local registry
            and go straight to the module provider. ``None`` disables it.
        debug: Optional sink receiving trace messages. ``True`` sends them to
            the ``depwire`` logger at INFO level, ``False`` disables the sink.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    prefix: str = Field(default="", description="Prefix for scanned names.")
    external_module_prefix: Optional[str] = Field(
        default=None,
        description="Prefix routing names to the module provider.",
    )
    debug: Optional[Callable[[str], Any]] = Field(default=None, description="Debug trace sink.")

    @field_validator("debug", mode="before")
    @classmethod
    def _coerce_debug(cls, value: Any) -> Any:
        if value is True:
            return logging.getLogger("depwire").info
        if value is False:
            return None
        return value
