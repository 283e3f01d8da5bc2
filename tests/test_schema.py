"""Tests for GraphQL field type classification."""

import pytest
from graphql import GraphQLSchema, build_schema

from realm_codegen.codegen.core.schema import (
    ScalarKind,
    TypeKind,
    classify,
    is_introspection_type,
    is_model_type,
    iter_model_types,
)

SDL = """
scalar Date

enum Role { ADMIN USER }

interface Node { id: ID! }

union SearchResult = User | Post

input UserFilter { name: String }

type User implements Node {
  id: ID!
  name: String
  age: Int!
  tags: [String]
  scores: [Float!]
  ids: [ID]!
  role: Role
  birthday: Date
  friend: User
  node: Node
  result: SearchResult
}

type Post { title: String }
"""


@pytest.fixture
def schema() -> GraphQLSchema:
    return build_schema(SDL)


def _field(schema: GraphQLSchema, name: str):
    return schema.type_map["User"].fields[name].type


# ###############
# Classification
# ###############


def test_non_null_scalar_is_not_optional(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "age"))

    assert classified.kind == TypeKind.SCALAR
    assert classified.scalar_kind == ScalarKind.INT
    assert classified.is_optional is False
    assert classified.is_list is False


def test_nullable_scalar_is_optional(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "name"))

    assert classified.scalar_kind == ScalarKind.STRING
    assert classified.is_optional is True


def test_id_scalar(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "id"))

    assert classified.scalar_kind == ScalarKind.ID
    assert classified.type_name == "ID"


def test_nullable_list_of_nullable_items(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "tags"))

    assert classified.is_list is True
    assert classified.is_optional is True
    assert classified.type_name == "String"


def test_non_null_items_make_list_non_optional(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "scores"))

    assert classified.is_list is True
    assert classified.is_optional is False
    assert classified.scalar_kind == ScalarKind.FLOAT


def test_non_null_list(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "ids"))

    assert classified.is_list is True
    assert classified.is_optional is False


def test_enum(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "role"))

    assert classified.kind == TypeKind.ENUM
    assert classified.scalar_kind is None


def test_custom_scalar_is_uncaught(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "birthday"))

    assert classified.kind == TypeKind.SCALAR
    assert classified.scalar_kind == ScalarKind.CUSTOM
    assert classified.is_uncaught_scalar is True


def test_builtin_scalar_is_not_uncaught(schema: GraphQLSchema) -> None:
    assert classify(_field(schema, "name")).is_uncaught_scalar is False


def test_object(schema: GraphQLSchema) -> None:
    classified = classify(_field(schema, "friend"))

    assert classified.kind == TypeKind.OBJECT
    assert classified.type_name == "User"


def test_interface_and_union_are_abstract(schema: GraphQLSchema) -> None:
    assert classify(_field(schema, "node")).kind == TypeKind.ABSTRACT
    assert classify(_field(schema, "result")).kind == TypeKind.ABSTRACT


def test_input_type_cannot_be_classified(schema: GraphQLSchema) -> None:
    with pytest.raises(TypeError):
        classify(schema.type_map["UserFilter"])


# ###############
# Model Types
# ###############


def test_introspection_names() -> None:
    assert is_introspection_type("__Schema")
    assert not is_introspection_type("User")


def test_model_types_are_user_object_types(schema: GraphQLSchema) -> None:
    names = [type_.name for type_ in iter_model_types(schema)]

    assert names == ["User", "Post"]


def test_non_object_types_are_not_models(schema: GraphQLSchema) -> None:
    for name in ["Role", "Node", "SearchResult", "UserFilter", "Date", "String", "__Type"]:
        assert not is_model_type(schema.type_map[name])


def test_empty_schema_has_no_model_types() -> None:
    assert list(iter_model_types(GraphQLSchema())) == []
