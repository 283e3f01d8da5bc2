"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .swift import (
    RealmModelGenerator,
    SwiftGenerator,
    create_realm_generator,
    generate_source,
)

__all__ = [
    "RealmModelGenerator",
    "SwiftGenerator",
    "create_realm_generator",
    "generate_source",
]
