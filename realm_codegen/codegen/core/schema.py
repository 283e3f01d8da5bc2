"""
Schema classification for code generation.

Reduces GraphQL field types to the small set of facts generators
branch on: the innermost named type, its kind, and whether the field
is optional and/or a list.
"""

from dataclasses import dataclass
from typing import Iterator, Optional
from enum import Enum

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLString,
    GraphQLType,
    GraphQLUnionType,
    is_output_type,
)

# GraphQL reserves this prefix for introspection types (__Schema, __Type, ...)
INTROSPECTION_PREFIX = "__"


class TypeKind(Enum):
    """Terminal kind of a fully unwrapped field type."""

    OBJECT = "object"
    SCALAR = "scalar"
    ENUM = "enum"
    ABSTRACT = "abstract"  # interfaces and unions


class ScalarKind(Enum):
    """Well-known scalar kinds. CUSTOM marks a scalar no generator handles."""

    BOOLEAN = "boolean"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ID = "id"
    CUSTOM = "custom"


BUILTIN_SCALAR_KINDS = {
    GraphQLBoolean.name: ScalarKind.BOOLEAN,
    GraphQLInt.name: ScalarKind.INT,
    GraphQLFloat.name: ScalarKind.FLOAT,
    GraphQLString.name: ScalarKind.STRING,
    GraphQLID.name: ScalarKind.ID,
}


@dataclass(frozen=True)
class ClassifiedType:
    """Innermost named type of a field plus the flags gathered unwrapping it."""

    named_type: GraphQLNamedType
    kind: TypeKind
    is_optional: bool = True
    is_list: bool = False
    scalar_kind: Optional[ScalarKind] = None

    @property
    def type_name(self) -> str:
        """Name of the innermost schema type."""
        return self.named_type.name

    @property
    def is_uncaught_scalar(self) -> bool:
        """True for scalars outside the five GraphQL built-ins."""
        return self.scalar_kind == ScalarKind.CUSTOM


def scalar_kind_for(scalar: GraphQLScalarType) -> ScalarKind:
    """Match a scalar against the built-in names, CUSTOM otherwise."""
    return BUILTIN_SCALAR_KINDS.get(scalar.name, ScalarKind.CUSTOM)


def classify(
    type_: GraphQLType, is_optional: bool = True, is_list: bool = False
) -> ClassifiedType:
    """
    Unwrap non-null and list layers and classify the innermost type.

    A non-null layer clears ``is_optional``; a list layer sets ``is_list``
    and keeps whatever optionality was accumulated so far. Layers are
    consumed outermost first, so ``[T]!`` and ``[T!]`` both end up
    non-optional while ``[T]`` stays optional.

    Args:
        type_: Field type reference from the schema graph
        is_optional: Optionality accumulated by enclosing layers
        is_list: Whether an enclosing layer was a list

    Returns:
        ClassifiedType for the innermost named type
    """
    if isinstance(type_, GraphQLNonNull):
        return classify(type_.of_type, False, is_list)

    if isinstance(type_, GraphQLList):
        return classify(type_.of_type, is_optional, True)

    if isinstance(type_, GraphQLObjectType):
        return ClassifiedType(type_, TypeKind.OBJECT, is_optional, is_list)

    if isinstance(type_, GraphQLScalarType):
        return ClassifiedType(
            type_, TypeKind.SCALAR, is_optional, is_list, scalar_kind_for(type_)
        )

    if isinstance(type_, GraphQLEnumType):
        return ClassifiedType(type_, TypeKind.ENUM, is_optional, is_list)

    if isinstance(type_, (GraphQLInterfaceType, GraphQLUnionType)):
        return ClassifiedType(type_, TypeKind.ABSTRACT, is_optional, is_list)

    raise TypeError(f"Cannot classify {type_!r}: not a GraphQL output type")


def is_introspection_type(name: str) -> bool:
    """Names starting with ``__`` belong to GraphQL introspection."""
    return name.startswith(INTROSPECTION_PREFIX)


def is_model_type(type_: GraphQLNamedType) -> bool:
    """True for user-visible object output types that get a model class."""
    return (
        isinstance(type_, GraphQLObjectType)
        and is_output_type(type_)
        and not is_introspection_type(type_.name)
    )


def iter_model_types(schema: GraphQLSchema) -> Iterator[GraphQLObjectType]:
    """Yield the schema's model types in type map order."""
    for type_ in schema.type_map.values():
        if is_model_type(type_):
            yield type_
