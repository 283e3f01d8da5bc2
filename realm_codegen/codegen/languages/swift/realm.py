"""
Realm model generator.

Emits one ``public final class <Type>: Object`` per GraphQL object type,
optionally inside a namespace enum, with a stored property per field.
"""

from typing import Any, Dict, List, Optional, Union

from graphql import (
    GraphQLField,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
)

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.naming import NamingCase
from ...core.schema import ScalarKind, TypeKind, classify, is_model_type, iter_model_types
from .generator import Class, Property, SwiftGenerator
from .naming import create_swift_sanitizer

logger = get_logger(__name__)

REALM_OBJECT_PROTOCOL = "Object"
REALM_IMPORTS = ["Apollo", "Realm", "RealmSwift"]

HEADER_TEMPLATE = """\
//  This file was automatically generated and should not be edited.

{% for module in imports %}
import {{ module }}
{% endfor %}
"""

# Realm.Object designated initializers a subclass must provide once it
# declares its own init
REQUIRED_INITIALIZERS = [
    ("init(value: Any, schema: RLMSchema)", "init(value:schema:)"),
    ("init()", "init()"),
    ("init(realm: RLMRealm, schema: RLMObjectSchema)", "init(realm:schema:)"),
]


class RealmModelGenerator(SwiftGenerator):
    """Generates RealmSwift ``Object`` subclasses from a GraphQL schema."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.sanitizer = create_swift_sanitizer()

    @property
    def language_name(self) -> str:
        return "swift-realm"

    def get_builtin_templates(self) -> Dict[str, str]:
        return {"header.swift.j2": HEADER_TEMPLATE}

    def generate(self, schema: GraphQLSchema) -> str:
        """Render the header and a model class for every object type."""
        self.reset()
        self.file_header()

        # An empty namespace enum is skipped so an empty schema yields only the header
        if any(True for _ in iter_model_types(schema)):
            with self.namespace_declaration(self.config.namespace):
                for type_ in schema.type_map.values():
                    self.realm_type_declaration(type_)

        return self.output

    def generate_single_type(self, type_: GraphQLObjectType) -> str:
        self.reset()
        self.generate_output_object(type_)
        return self.output

    def file_header(self) -> None:
        header = self.render_template("header.swift.j2", {"imports": REALM_IMPORTS})
        for line in header.rstrip("\n").split("\n"):
            if line:
                self.print_on_newline(line)
            else:
                self.print_newline()

    def realm_type_declaration(self, type_: GraphQLNamedType) -> None:
        """Render ``type_`` if it is a user-visible object type, skip it otherwise."""
        if is_model_type(type_):
            self.generate_output_object(type_)
        else:
            logger.debug("Skipping type %s", type_.name)

    def generate_output_object(self, type_: GraphQLObjectType) -> None:
        logger.debug("Generating model %s", type_.name)
        self.sanitizer.reset_used_names()

        class_ = Class(
            class_name=type_.name,
            modifiers=["public", "final"],
            adopted_protocols=[REALM_OBJECT_PROTOCOL],
        )
        with self.class_declaration(class_):
            properties = [
                self.generate_field_declaration(field_name, field)
                for field_name, field in type_.fields.items()
            ]

            if self.config.generate_initializers:
                self.generate_output_object_initializer(properties)
                self.override_designated_initializers()

    def generate_field_declaration(self, field_name: str, field: GraphQLField) -> Property:
        property_name = self.sanitizer.sanitize_name(field_name, NamingCase.CAMEL_CASE)
        base_name = self.sanitizer.base_name(field_name, NamingCase.CAMEL_CASE)
        if property_name != self.sanitizer.escape_if_reserved(base_name):
            logger.warning(
                "Field %s renamed to %s: %s is already declared",
                self.qualified_name(field_name),
                property_name,
                base_name,
            )

        prop = Property(
            property_name=property_name,
            type_name=self.type_mapper.root_type_name_from_graphql_type(field.type),
            type=field.type,
            description=field.description if self.config.add_comments else None,
        )
        classified = classify(field.type)

        self.comment(prop.description)
        if self.config.add_deprecation_attributes:
            self.deprecation_attributes(
                field.deprecation_reason is not None, field.deprecation_reason
            )
        self.print_property(classified, prop.property_name, prop.type_name)

        if classified.is_uncaught_scalar and not classified.is_list:
            logger.warning(
                "Uncaught scalar %s for field %s", classified.type_name, field_name
            )

        return prop

    # Initializers

    def generate_output_object_initializer(self, properties: List[Property]) -> None:
        """Print a memberwise ``public init`` for the declared properties."""
        stored = [prop for prop in properties if self._has_stored_property(prop)]

        self.print_newline()
        self.print_on_newline("public init")
        self.parameters_for_properties(stored)
        with self.within_block():
            for prop in stored:
                self.print_on_newline(self._property_assignment(prop))
            self.print_on_newline("super.init()")

    def parameters_for_properties(self, properties: List[Property]) -> None:
        self.print("(")
        self.print(", ".join(self.parameter_for_property(prop) for prop in properties))
        self.print(")")

    def parameter_for_property(self, prop: Property) -> str:
        type_name = self.type_mapper.type_name_from_graphql_type(prop.type)
        default = " = nil" if _is_nullable(prop) else ""
        return f"{prop.property_name}: {type_name}{default}"

    def override_designated_initializers(self) -> None:
        for signature, selector in REQUIRED_INITIALIZERS:
            self.print_newline()
            self.print_on_newline(f"required public {signature}")
            with self.within_block():
                self.print_on_newline(f'fatalError("{selector} has not been implemented")')

    def _has_stored_property(self, prop: Property) -> bool:
        classified = classify(prop.type)
        if classified.is_list:
            return True
        if classified.kind == TypeKind.ABSTRACT:
            return False
        return not classified.is_uncaught_scalar

    def _property_assignment(self, prop: Property) -> str:
        classified = classify(prop.type)
        name = prop.property_name

        if classified.is_list:
            source = f"{name} ?? []" if _is_nullable(prop) else name
            return f"self.{name}.append(objectsIn: {source})"

        boxed = (ScalarKind.BOOLEAN, ScalarKind.INT, ScalarKind.FLOAT)
        if classified.scalar_kind in boxed and classified.is_optional:
            return f"self.{name}.value = {name}"

        return f"self.{name} = {name}"


def generate_source(
    schema: GraphQLSchema,
    options: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> str:
    """
    Generate the Realm model source for ``schema``.

    Args:
        schema: GraphQL schema graph
        options: GeneratorConfig, or a dict such as
            ``{"namespace": "API", "passthroughCustomScalars": True}``

    Returns:
        Swift source text
    """
    if isinstance(options, GeneratorConfig):
        config = options
    else:
        config = load_config(custom_config=options)

    return RealmModelGenerator(config).generate(schema)


def _is_nullable(prop: Property) -> bool:
    """Whether the field itself (not its list elements) may be null."""
    return not isinstance(prop.type, GraphQLNonNull)
