"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Dict, List, Any, Optional
from pathlib import Path

from graphql import GraphQLObjectType, GraphQLSchema

from ...logging_config import get_logger
from .config import GeneratorConfig, get_config_manager
from .printer import CodePrinter
from .schema import TypeKind, classify, iter_model_types
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(CodePrinter, ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        super().__init__(
            indent_width=self.config.indent_size, use_tabs=self.config.use_tabs
        )
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        for name, content in self.get_builtin_templates().items():
            self._template_engine.add_template(name, content)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'swift-realm')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.swift')."""
        pass

    @property
    def reserved_words(self) -> AbstractSet[str]:
        """Keywords of the target language that identifiers must avoid."""
        return frozenset()

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def get_builtin_templates(self) -> Dict[str, str]:
        """In-memory templates registered with the engine, by name."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: GraphQLSchema) -> str:
        """
        Generate code for every model type in the schema.

        Args:
            schema: GraphQL schema graph

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_type(self, type_: GraphQLObjectType) -> str:
        """
        Generate code for a single object type.

        Args:
            type_: Object type to generate code for

        Returns:
            Generated code for this type only
        """
        pass

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """
        Collect warnings about constructs the generator cannot express.

        Generation proceeds regardless; these only point reviewers at the
        gaps in the output.

        Args:
            schema: Schema to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for type_ in iter_model_types(schema):
            if not type_.fields:
                warnings.append(f"Type '{type_.name}' has no fields")

            for field_name, field in type_.fields.items():
                classified = classify(field.type)
                if classified.is_uncaught_scalar and not classified.is_list:
                    warnings.append(
                        f"Uncaught scalar in {type_.name}.{field_name}: {classified.type_name}"
                    )
                elif classified.kind == TypeKind.ABSTRACT and not classified.is_list:
                    warnings.append(
                        f"No declaration for abstract type in "
                        f"{type_.name}.{field_name}: {classified.type_name}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: GraphQLSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = get_config_manager().validate_config(
            generator.config, generator.reserved_words
        )
        warnings.extend(generator.validate_schema(schema))
        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(schema)
        formatted_code = generator.format_code(code)

        model_types = list(iter_model_types(schema))
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(model_types),
            "namespace": generator.config.namespace,
            "has_uncaught_scalars": any(
                classify(field.type).is_uncaught_scalar
                for type_ in model_types
                for field in type_.fields.values()
            ),
        }

        logger.info(
            "Generated %d %s model(s)", len(model_types), generator.language_name
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
