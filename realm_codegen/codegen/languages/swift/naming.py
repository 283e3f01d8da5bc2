"""
Swift-specific naming utilities and sanitization.

Handles Swift reserved words and string literal escaping.
"""

from ...core.naming import NameSanitizer


# Swift keywords and contextual keywords that need backticks as identifiers
SWIFT_RESERVED_WORDS = frozenset({
    # Declarations
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "static", "struct", "subscript",
    "typealias", "var",
    # Statements
    "break", "case", "continue", "default", "defer", "do", "else",
    "fallthrough", "for", "guard", "if", "in", "repeat", "return", "switch",
    "where", "while",
    # Expressions and types
    "as", "Any", "catch", "false", "is", "nil", "rethrows", "super", "self",
    "Self", "throw", "throws", "true", "try",
    # Contextual
    "associativity", "convenience", "dynamic", "didSet", "final", "get",
    "infix", "indirect", "lazy", "left", "mutating", "none", "nonmutating",
    "optional", "override", "postfix", "precedence", "prefix", "Protocol",
    "required", "right", "set", "Type", "unowned", "weak", "willSet",
})

VERBATIM_IDENTIFIER_FORMAT = "`{name}`"


def escape_identifier_if_needed(identifier: str) -> str:
    """Wrap ``identifier`` in backticks when it is a Swift reserved word."""
    if identifier in SWIFT_RESERVED_WORDS:
        return VERBATIM_IDENTIFIER_FORMAT.format(name=identifier)
    return identifier


def escaped_string(string: str) -> str:
    """Escape quotes and newlines for use inside a Swift string literal."""
    return string.replace('"', '\\"').replace("\n", "\\n")


def create_swift_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Swift."""
    return NameSanitizer(set(SWIFT_RESERVED_WORDS), VERBATIM_IDENTIFIER_FORMAT)
