"""
Swift type naming for Realm models.

Maps classified GraphQL types to the Swift type names used in
property declarations and initializer parameters.
"""

from dataclasses import dataclass

from graphql import GraphQLList, GraphQLNonNull, GraphQLType

from ...core.config import GeneratorConfig
from ...core.schema import ClassifiedType, ScalarKind, TypeKind, classify


# Realm stores ID values and enum raw values as String
SCALAR_TYPE_NAMES = {
    ScalarKind.BOOLEAN: "Bool",
    ScalarKind.INT: "Int",
    ScalarKind.FLOAT: "Float",
    ScalarKind.STRING: "String",
    ScalarKind.ID: "String",
}

ENUM_STORAGE_TYPE = "String"


@dataclass
class SwiftTypeConfig:
    """Custom scalar naming options."""

    passthrough_custom_scalars: bool = False
    custom_scalars_prefix: str = ""

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "SwiftTypeConfig":
        return cls(
            passthrough_custom_scalars=config.passthrough_custom_scalars,
            custom_scalars_prefix=config.custom_scalars_prefix,
        )


class SwiftTypeMapper:
    """Maps classified GraphQL types to Swift type names."""

    def __init__(self, config: SwiftTypeConfig = None):
        self.config = config or SwiftTypeConfig()

    def root_type_name(self, classified: ClassifiedType) -> str:
        """
        Swift name of the innermost type, ignoring optionality and lists.

        Custom scalars keep their schema name (plus prefix) only when
        passthrough is enabled; otherwise they are treated as strings.
        """
        if classified.kind == TypeKind.SCALAR:
            if classified.scalar_kind == ScalarKind.CUSTOM:
                if self.config.passthrough_custom_scalars:
                    return self.config.custom_scalars_prefix + classified.type_name
                return "String"
            return SCALAR_TYPE_NAMES[classified.scalar_kind]

        if classified.kind == TypeKind.ENUM:
            return ENUM_STORAGE_TYPE

        return classified.type_name

    def root_type_name_from_graphql_type(self, type_: GraphQLType) -> str:
        return self.root_type_name(classify(type_))

    def type_name_from_graphql_type(
        self, type_: GraphQLType, is_optional: bool = True
    ) -> str:
        """
        Full Swift type for a GraphQL type reference.

        ``String!`` becomes ``String``, ``String`` becomes ``String?`` and
        ``[Int!]`` becomes ``[Int]?``. List elements are never optional,
        matching the ``List<T>`` properties they are appended to.
        """
        if isinstance(type_, GraphQLNonNull):
            return self.type_name_from_graphql_type(type_.of_type, False)

        if isinstance(type_, GraphQLList):
            name = f"[{self.type_name_from_graphql_type(type_.of_type, False)}]"
        else:
            name = self.root_type_name_from_graphql_type(type_)

        return f"{name}?" if is_optional else name
