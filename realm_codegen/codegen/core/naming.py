"""
Naming utilities for safe code generation.

Handles case conversions, reserved-word escaping and per-scope
name collisions for generated identifiers.
"""

import re
from typing import Set, Dict, Optional
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    ORIGINAL = "original"     # leave as declared in the schema


class NameSanitizer:
    """Handles name sanitization, case conversion and keyword escaping."""

    def __init__(self, reserved_words: Optional[Set[str]] = None,
                 escape_format: str = "{name}_"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words (case-sensitive)
            escape_format: Format applied to a name that is a reserved word,
                e.g. ``"`{name}`"`` for Swift verbatim identifiers
        """
        self.reserved_words = reserved_words or set()
        self.escape_format = escape_format
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Converted, escaped and de-duplicated name
        """
        cache_key = f"{name}_{target_case.value}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        unique = self._resolve_duplicates(self.base_name(name, target_case))
        final_name = self.escape_if_reserved(unique)

        self._name_cache[cache_key] = final_name
        self._used_names.add(unique)

        return final_name

    def base_name(self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE) -> str:
        """Cleaned and case-converted name, before de-duplication and escaping."""
        return self.convert_case(self._clean_basic(name), target_case)

    def escape_if_reserved(self, name: str) -> str:
        """Wrap ``name`` with the escape format if it is a reserved word."""
        if name in self.reserved_words:
            return self.escape_format.format(name=name)
        return name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', name)

        # Leading underscores are kept: GraphQL allows them in field names
        cleaned = cleaned.strip('-')

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "field"

        return cleaned

    def convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        name = name.replace('-', '_')

        # Split acronyms from following words: HTTPServer -> HTTP_Server
        name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

        name = name.lower()
        name = re.sub(r'_+', '_', name)

        return name.strip('_')

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        snake = self._to_snake_case(name)
        parts = [part for part in snake.split('_') if part]

        if not parts:
            return name

        return parts[0] + ''.join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        return ''.join(part.capitalize() for part in snake.split('_') if part)

    def _resolve_duplicates(self, name: str) -> str:
        """Append a counter until the name is unique in the current scope."""
        candidate = name
        counter = 1
        while candidate in self._used_names:
            candidate = f"{name}{counter}"
            counter += 1
        return candidate

    def reset_used_names(self):
        """Forget names used so far, e.g. when a new class scope opens."""
        self._used_names.clear()
        self._name_cache.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)


def camel_case(name: str) -> str:
    """Convert ``name`` to camelCase without escaping or de-duplication."""
    return NameSanitizer().convert_case(name, NamingCase.CAMEL_CASE)


def pascal_case(name: str) -> str:
    """Convert ``name`` to PascalCase without escaping or de-duplication."""
    return NameSanitizer().convert_case(name, NamingCase.PASCAL_CASE)
