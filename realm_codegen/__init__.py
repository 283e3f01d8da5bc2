"""
realm-codegen: generate RealmSwift model classes from GraphQL schemas.

Example:
    >>> from graphql import build_schema
    >>> from realm_codegen import generate_source
    >>> schema = build_schema("type User { id: ID! name: String }")
    >>> print(generate_source(schema, {"namespace": "API"}))
"""

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    RealmModelGenerator,
    generate_from_schema,
    generate_source,
    quick_generate,
)
from .utils import SchemaLoaderError, load_schema

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "RealmModelGenerator",
    "SchemaLoaderError",
    "generate_from_schema",
    "generate_source",
    "load_schema",
    "quick_generate",
]
