"""
Swift code generator module.

Generates RealmSwift model classes from a GraphQL schema.
"""

from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from .generator import Class, Property, Protocol, Struct, SwiftGenerator
from .naming import (
    SWIFT_RESERVED_WORDS,
    create_swift_sanitizer,
    escape_identifier_if_needed,
    escaped_string,
)
from .realm import RealmModelGenerator, generate_source
from .types import SwiftTypeConfig, SwiftTypeMapper

__all__ = [
    # Generators
    "SwiftGenerator",
    "RealmModelGenerator",
    "generate_source",
    # Declarations
    "Class",
    "Struct",
    "Protocol",
    "Property",
    # Naming
    "SWIFT_RESERVED_WORDS",
    "create_swift_sanitizer",
    "escape_identifier_if_needed",
    "escaped_string",
    # Types
    "SwiftTypeConfig",
    "SwiftTypeMapper",
    # Factory functions
    "create_realm_generator",
    "create_namespaced_generator",
    "create_full_model_generator",
]


def create_realm_generator(config: Optional[Dict[str, Any]] = None) -> RealmModelGenerator:
    """
    Create a Realm generator.

    Args:
        config: Option overrides (namespace, passthroughCustomScalars, ...)

    Returns:
        Configured RealmModelGenerator instance
    """
    return RealmModelGenerator(load_config(custom_config=config))


def create_namespaced_generator(namespace: str) -> RealmModelGenerator:
    """Create a generator that nests every model in ``public enum <namespace>``."""
    return RealmModelGenerator(GeneratorConfig(namespace=namespace))


def create_full_model_generator(namespace: Optional[str] = None) -> RealmModelGenerator:
    """
    Create a generator that also emits initializers and deprecation attributes.

    Features:
    - Memberwise ``public init`` per model
    - Required Realm initializer overrides
    - ``@available(*, deprecated)`` on deprecated fields
    """
    return RealmModelGenerator(
        GeneratorConfig(
            namespace=namespace,
            generate_initializers=True,
            add_deprecation_attributes=True,
        )
    )
