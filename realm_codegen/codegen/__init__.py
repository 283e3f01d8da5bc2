"""
Realm Codegen Code Generation Module

Generates Realm model source code from GraphQL schemas.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from graphql import GraphQLSchema, build_schema

from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.schema import ClassifiedType, ScalarKind, TypeKind, classify
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .languages.swift import RealmModelGenerator, generate_source

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]

# Convenience functions


def get_generator(config: ConfigSource = None) -> RealmModelGenerator:
    """
    Create a Realm model generator.

    Args:
        config: GeneratorConfig, option dict, JSON config file path, or None
            for the defaults

    Returns:
        Configured RealmModelGenerator

    Raises:
        ConfigError: If the config file cannot be loaded or the type is wrong
    """
    if isinstance(config, GeneratorConfig):
        return RealmModelGenerator(config)
    if isinstance(config, (str, Path)):
        return RealmModelGenerator(load_config(config_file=config))
    if config is None or isinstance(config, dict):
        return RealmModelGenerator(load_config(custom_config=config))
    raise ConfigError(f"Invalid config type: {type(config)}")


def generate_from_schema(
    schema: GraphQLSchema, config: ConfigSource = None
) -> GenerationResult:
    """
    Generate Realm models from a GraphQL schema.

    Args:
        schema: GraphQL schema graph
        config: Generator configuration dict, GeneratorConfig or file path

    Returns:
        GenerationResult with generated code
    """
    return generate_code(get_generator(config), schema)


def quick_generate(sdl: str, **options) -> str:
    """
    Quick code generation from schema SDL.

    Args:
        sdl: GraphQL schema definition language source
        **options: Generator options, e.g. ``namespace="API"``

    Returns:
        Generated code string
    """
    schema = build_schema(sdl)
    result = generate_from_schema(schema, options)

    if result.success:
        return result.code
    raise GeneratorError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "ClassifiedType",
    "ScalarKind",
    "TypeKind",
    "classify",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "RealmModelGenerator",
    "generate_source",
    "generate_code",
    "generate_from_schema",
    "get_generator",
    "quick_generate",
]
