"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    ClassifiedType,
    TypeKind,
    ScalarKind,
    classify,
    is_introspection_type,
    is_model_type,
    iter_model_types,
)
from .printer import CodePrinter, PrinterError, ScopeFrame
from .naming import NameSanitizer, NamingCase, camel_case, pascal_case
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Type classification
    "ClassifiedType",
    "TypeKind",
    "ScalarKind",
    "classify",
    "is_introspection_type",
    "is_model_type",
    "iter_model_types",
    # Printer primitives
    "CodePrinter",
    "PrinterError",
    "ScopeFrame",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "camel_case",
    "pascal_case",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
