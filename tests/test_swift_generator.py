"""Tests for Swift declaration printing and type naming."""

import pytest
from graphql import GraphQLSchema, build_schema

from realm_codegen.codegen.core.config import GeneratorConfig
from realm_codegen.codegen.core.schema import classify
from realm_codegen.codegen.languages.swift import (
    Class,
    Property,
    Protocol,
    RealmModelGenerator,
    Struct,
    SwiftTypeConfig,
    SwiftTypeMapper,
)

SDL = """
scalar Date

enum Role { ADMIN USER }

interface Node { id: ID! }

type Post { title: String }

type Sample {
  id: ID!
  optionalId: ID
  name: String
  requiredName: String!
  flag: Boolean
  requiredFlag: Boolean!
  count: Int
  requiredCount: Int!
  ratio: Float
  requiredRatio: Float!
  role: Role
  requiredRole: Role!
  post: Post
  requiredPost: Post!
  birthday: Date
  node: Node
  tags: [String]
  requiredTags: [Int!]!
  roles: [Role]
  ids: [ID!]
  dates: [Date]
  posts: [Post!]!
}
"""


@pytest.fixture
def schema() -> GraphQLSchema:
    return build_schema(SDL)


@pytest.fixture
def generator() -> RealmModelGenerator:
    return RealmModelGenerator()


def _print_field(generator: RealmModelGenerator, schema: GraphQLSchema, name: str) -> str:
    generator.reset()
    field_type = schema.type_map["Sample"].fields[name].type
    generator.print_property(classify(field_type), name)
    return generator.output


# ###############
# Property Decision Table
# ###############


@pytest.mark.parametrize(
    "field_name, expected",
    [
        ("name", "dynamic var name: String? = nil"),
        ("requiredName", 'dynamic var requiredName = ""'),
        ("flag", "let flag = RealmOptional<Bool>()"),
        ("requiredFlag", "dynamic var requiredFlag = false"),
        ("count", "let count = RealmOptional<Int>()"),
        ("requiredCount", "dynamic var requiredCount = 0"),
        ("ratio", "let ratio = RealmOptional<Float>()"),
        ("requiredRatio", "dynamic var requiredRatio: Float = 0.0"),
        ("role", "dynamic var role: String? = nil"),
        ("requiredRole", "dynamic var requiredRole: String? = nil"),
        ("post", "dynamic var post: Post?"),
        ("requiredPost", "dynamic var requiredPost: Post?"),
        ("birthday", "UNCAUGHT SCALAR Date"),
        ("tags", "let tags = List<String>()"),
        ("requiredTags", "let requiredTags = List<Int>()"),
        ("roles", "let roles = List<String>()"),
        ("ids", "let ids = List<String>()"),
        ("dates", "let dates = List<String>()"),
        ("posts", "let posts = List<Post>()"),
    ],
)
def test_property_declaration(
    generator: RealmModelGenerator, schema: GraphQLSchema, field_name: str, expected: str
) -> None:
    assert _print_field(generator, schema, field_name) == expected


def test_required_id_declares_primary_key(
    generator: RealmModelGenerator, schema: GraphQLSchema
) -> None:
    assert _print_field(generator, schema, "id") == (
        'dynamic var id = ""\n'
        "override public static func primaryKey() -> String? {\n"
        '  return "id"\n'
        "}"
    )


def test_optional_id_declares_primary_key(
    generator: RealmModelGenerator, schema: GraphQLSchema
) -> None:
    assert _print_field(generator, schema, "optionalId") == (
        "dynamic var optionalId: String? = nil\n"
        "override public static func primaryKey() -> String? {\n"
        '  return "optionalId"\n'
        "}"
    )


def test_abstract_field_prints_nothing(
    generator: RealmModelGenerator, schema: GraphQLSchema
) -> None:
    assert _print_field(generator, schema, "node") == ""


def test_primary_key_strips_backticks(generator: RealmModelGenerator) -> None:
    generator.primary_key_declaration("`default`")
    assert 'return "default"' in generator.output


def test_passthrough_custom_scalar_uses_prefixed_name(schema: GraphQLSchema) -> None:
    generator = RealmModelGenerator(
        GeneratorConfig(passthrough_custom_scalars=True, custom_scalars_prefix="GQL")
    )
    assert _print_field(generator, schema, "dates") == "let dates = List<GQLDate>()"


def test_passthrough_does_not_rescue_single_custom_scalar(schema: GraphQLSchema) -> None:
    generator = RealmModelGenerator(GeneratorConfig(passthrough_custom_scalars=True))
    assert _print_field(generator, schema, "birthday") == "UNCAUGHT SCALAR Date"


# ###############
# Comments and Attributes
# ###############


def test_comment_prints_one_doc_line_per_non_empty_line(
    generator: RealmModelGenerator,
) -> None:
    generator.comment("First line\n\n   Second line  ")
    assert generator.output == "/// First line\n/// Second line"


def test_comment_ignores_missing_description(generator: RealmModelGenerator) -> None:
    generator.comment(None)
    generator.comment("")
    assert generator.output == ""


def test_deprecation_attribute(generator: RealmModelGenerator) -> None:
    generator.deprecation_attributes(True, 'Use "fullName"')
    generator.deprecation_attributes(False, None)
    assert generator.output == '@available(*, deprecated, message: "Use \\"fullName\\"")'


def test_multiline_string(generator: RealmModelGenerator) -> None:
    generator.multiline_string("a\nb")
    assert generator.output == '"a\\nb"'


# ###############
# Declarations
# ###############


def test_class_declaration(generator: RealmModelGenerator) -> None:
    with generator.class_declaration(
        Class("User", modifiers=["public", "final"], adopted_protocols=["Object"])
    ):
        generator.print_on_newline("body")

    assert generator.output == "public final class User: Object {\n  body\n}"


def test_class_declaration_with_super_class(generator: RealmModelGenerator) -> None:
    with generator.class_declaration(
        Class("User", super_class="Base", adopted_protocols=["Codable"])
    ):
        pass

    assert generator.output == "class User: Base, Codable {\n}"


def test_struct_declaration_with_description(generator: RealmModelGenerator) -> None:
    with generator.struct_declaration(Struct("Point", ["Equatable"], "A point")):
        pass

    assert generator.output == "/// A point\npublic struct Point: Equatable {\n}"


def test_protocol_declaration_with_properties(
    generator: RealmModelGenerator, schema: GraphQLSchema
) -> None:
    prop = Property("name", "String?", schema.type_map["Sample"].fields["name"].type)
    with generator.protocol_declaration(Protocol("Named")):
        generator.protocol_property_declarations([prop])

    assert generator.output == "public protocol Named {\n  var name: String? { get }\n}"


def test_property_declarations_include_comments(
    generator: RealmModelGenerator, schema: GraphQLSchema
) -> None:
    fields = schema.type_map["Sample"].fields
    generator.property_declarations(
        [
            Property("name", "String", fields["name"].type, "The name"),
            Property("count", "Int", fields["count"].type),
        ]
    )

    assert generator.output == (
        "/// The name\n"
        "dynamic var name: String? = nil\n"
        "let count = RealmOptional<Int>()"
    )


def test_declaration_tracks_scope(generator: RealmModelGenerator) -> None:
    with generator.namespace_declaration("API"):
        with generator.class_declaration(Class("User")):
            assert generator.qualified_name("id") == "API.User.id"
    assert generator.scope_depth == 0


def test_declaration_closes_scope_on_error(generator: RealmModelGenerator) -> None:
    with pytest.raises(RuntimeError):
        with generator.namespace_declaration("API"):
            with generator.class_declaration(Class("User")):
                raise RuntimeError("boom")

    assert generator.scope_depth == 0
    assert generator.indent_level == 0


def test_namespace_declaration_without_namespace_is_transparent(
    generator: RealmModelGenerator,
) -> None:
    with generator.namespace_declaration(None):
        generator.print_on_newline("body")

    assert generator.output == "body"


# ###############
# Type Names
# ###############


@pytest.mark.parametrize(
    "field_name, expected",
    [
        ("name", "String?"),
        ("requiredName", "String"),
        ("id", "String"),
        ("flag", "Bool?"),
        ("requiredRatio", "Float"),
        ("role", "String?"),
        ("post", "Post?"),
        ("tags", "[String]?"),
        ("requiredTags", "[Int]"),
        ("posts", "[Post]"),
        ("birthday", "String?"),
    ],
)
def test_swift_type_names(schema: GraphQLSchema, field_name: str, expected: str) -> None:
    mapper = SwiftTypeMapper()
    field_type = schema.type_map["Sample"].fields[field_name].type

    assert mapper.type_name_from_graphql_type(field_type) == expected


def test_custom_scalar_type_name_with_passthrough(schema: GraphQLSchema) -> None:
    mapper = SwiftTypeMapper(
        SwiftTypeConfig(passthrough_custom_scalars=True, custom_scalars_prefix="API.")
    )
    field_type = schema.type_map["Sample"].fields["birthday"].type

    assert mapper.root_type_name_from_graphql_type(field_type) == "API.Date"
