"""Script blocks for tasks and extensions.

Both share one recursive shape: method invocations, attribute assignments
(``=`` or ``+=``) and nested blocks keyed by property name, each nested block
having that same shape again. Types referenced by an assignment can be
registered as imports; they surface on the snapshot of the outermost block.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from buildgen.model.container import BuilderContainer


class AttributeType(str, Enum):
    SET = "set"
    APPEND = "append"


class Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    type: AttributeType = AttributeType.SET

    @property
    def operator(self) -> str:
        return "=" if self.type is AttributeType.SET else "+="


class Invocation(BaseModel):
    """A method call; arguments are script expressions and are written verbatim."""

    model_config = ConfigDict(frozen=True)

    target: str
    arguments: tuple[str, ...] = ()


class Customization(BaseModel):
    """Immutable block body."""

    model_config = ConfigDict(frozen=True)

    name: str
    invocations: tuple[Invocation, ...] = ()
    attributes: tuple[Attribute, ...] = ()
    nested: tuple[Customization, ...] = ()
    imported_types: tuple[str, ...] = ()

    def all_imported_types(self) -> set[str]:
        """Imports required by this block and every nested block."""
        imports = set(self.imported_types)
        for child in self.nested:
            imports |= child.all_imported_types()
        return imports


Customization.model_rebuild()


class GradleTask(Customization):
    """A task customization.

    With a ``type`` the block applies to every task of that type
    (``tasks.withType``); ``name`` is then the simple type name.
    """

    type: str | None = None


class GradleExtension(Customization):
    """A project extension block such as ``springBoot { ... }``."""


class CustomizationBuilder:
    """Mutable accumulator for a :class:`Customization`.

    Assigning the same attribute twice keeps the last value at the position of
    the first assignment.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._invocations: list[Invocation] = []
        self._attributes: dict[str, Attribute] = {}
        self._nested: BuilderContainer[CustomizationBuilder, Customization] = BuilderContainer(
            CustomizationBuilder
        )
        self._imported_types: set[str] = set()

    def attribute(self, target: str, value: str) -> CustomizationBuilder:
        self._attributes[target] = Attribute(name=target, value=value)
        return self

    def append(self, target: str, value: str) -> CustomizationBuilder:
        self._attributes[target] = Attribute(name=target, value=value, type=AttributeType.APPEND)
        return self

    def attribute_with_type(self, target: str, value: str, type_name: str) -> CustomizationBuilder:
        """Assign *value* and import *type_name*, which the value refers to."""
        return self.import_type(type_name).attribute(target, value)

    def append_with_type(self, target: str, value: str, type_name: str) -> CustomizationBuilder:
        return self.import_type(type_name).append(target, value)

    def import_type(self, type_name: str) -> CustomizationBuilder:
        self._imported_types.add(type_name)
        return self

    def invoke(self, target: str, *arguments: str) -> CustomizationBuilder:
        self._invocations.append(Invocation(target=target, arguments=arguments))
        return self

    def nested(self, property_name: str, customizer: Callable[[CustomizationBuilder], object]) -> CustomizationBuilder:
        """Customize the nested block *property_name*, creating it on first use."""
        self._nested.customize(property_name, customizer)
        return self

    def _fields(self) -> dict:
        return {
            "name": self.name,
            "invocations": tuple(self._invocations),
            "attributes": tuple(self._attributes.values()),
            "nested": tuple(self._nested.values()),
            "imported_types": tuple(sorted(self._imported_types)),
        }

    def build(self) -> Customization:
        return Customization(**self._fields())


class GradleTaskBuilder(CustomizationBuilder):
    def __init__(self, name: str, type_name: str | None = None) -> None:
        super().__init__(name)
        self.type = type_name

    def build(self) -> GradleTask:
        return GradleTask(type=self.type, **self._fields())


class GradleExtensionBuilder(CustomizationBuilder):
    def build(self) -> GradleExtension:
        return GradleExtension(**self._fields())


def _simple_name(type_name: str) -> str:
    return type_name.rpartition(".")[2]


class GradleTaskContainer:
    """Task customizations, by type and by name.

    Typed customizations are rendered first, then named ones, each group in
    insertion order.
    """

    def __init__(self) -> None:
        self._typed: BuilderContainer[GradleTaskBuilder, GradleTask] = BuilderContainer(
            self._typed_builder
        )
        self._named: BuilderContainer[GradleTaskBuilder, GradleTask] = BuilderContainer(GradleTaskBuilder)

    @staticmethod
    def _typed_builder(type_name: str) -> GradleTaskBuilder:
        builder = GradleTaskBuilder(_simple_name(type_name), type_name)
        if "." in type_name:
            builder.import_type(type_name)
        return builder

    def customize(
        self, name: str, customizer: Callable[[GradleTaskBuilder], object] | None = None
    ) -> GradleTaskBuilder:
        return self._named.customize(name, customizer)

    def customize_with_type(
        self, type_name: str, customizer: Callable[[GradleTaskBuilder], object] | None = None
    ) -> GradleTaskBuilder:
        """Customize every task of *type_name*; a qualified name is imported."""
        return self._typed.customize(type_name, customizer)

    def has(self, name: str) -> bool:
        return self._named.has(name)

    def has_type(self, type_name: str) -> bool:
        return self._typed.has(type_name)

    def remove(self, name: str) -> bool:
        return self._named.remove(name)

    def remove_type(self, type_name: str) -> bool:
        return self._typed.remove(type_name)

    def is_empty(self) -> bool:
        return self._typed.is_empty() and self._named.is_empty()

    def values(self) -> list[GradleTask]:
        return self._typed.values() + self._named.values()


class GradleExtensionContainer(BuilderContainer[GradleExtensionBuilder, GradleExtension]):
    """Extension blocks keyed by name."""

    def __init__(self) -> None:
        super().__init__(GradleExtensionBuilder)
