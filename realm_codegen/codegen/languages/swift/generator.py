"""
Swift declaration printer.

Knows how to open and close Swift declaration blocks and how to turn a
classified GraphQL field type into a Realm stored property.
"""

from abc import ABC
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import AbstractSet, Iterator, List, Optional, Sequence

from graphql import GraphQLType

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.printer import ScopeFrame
from ...core.schema import ClassifiedType, ScalarKind, TypeKind, classify
from .naming import SWIFT_RESERVED_WORDS, escaped_string
from .types import SwiftTypeConfig, SwiftTypeMapper


@dataclass
class Class:
    class_name: str
    modifiers: List[str] = field(default_factory=list)
    super_class: Optional[str] = None
    adopted_protocols: List[str] = field(default_factory=list)


@dataclass
class Struct:
    struct_name: str
    adopted_protocols: List[str] = field(default_factory=list)
    description: Optional[str] = None


@dataclass
class Protocol:
    protocol_name: str
    adopted_protocols: List[str] = field(default_factory=list)


@dataclass
class Property:
    property_name: str
    type_name: str
    type: GraphQLType
    description: Optional[str] = None


def join(parts: Sequence[Optional[str]], separator: str = "") -> str:
    """Join the non-empty parts."""
    return separator.join(part for part in parts if part)


def wrap(start: str, text: Optional[str], end: str = "") -> str:
    """Surround ``text`` with ``start``/``end``, or return "" when it is empty."""
    return f"{start}{text}{end}" if text else ""


class SwiftGenerator(CodeGenerator, ABC):
    """Base class for generators that emit Swift source."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.type_mapper = SwiftTypeMapper(
            SwiftTypeConfig.from_generator_config(self.config)
        )

    @property
    def file_extension(self) -> str:
        return ".swift"

    @property
    def reserved_words(self) -> AbstractSet[str]:
        return SWIFT_RESERVED_WORDS

    def multiline_string(self, string: str) -> None:
        self.print_on_newline(f'"{escaped_string(string)}"')

    def comment(self, comment: Optional[str]) -> None:
        """Print ``comment`` as ``///`` documentation lines."""
        if not comment:
            return
        for line in comment.split("\n"):
            line = line.strip()
            if line:
                self.print_on_newline(f"/// {line}")

    def deprecation_attributes(
        self, is_deprecated: Optional[bool], deprecation_reason: Optional[str]
    ) -> None:
        if is_deprecated:
            self.print_on_newline(
                f'@available(*, deprecated, message: "{escaped_string(deprecation_reason or "")}")'
            )

    # Declaration blocks

    def open_scope(
        self,
        keyword: str,
        name: str,
        modifiers: Sequence[str] = (),
        inherited: Sequence[Optional[str]] = (),
        description: Optional[str] = None,
    ) -> None:
        """Print ``<modifiers> keyword name: inherited {`` and enter the block."""
        self.print_newline_if_needed()
        self.comment(description)
        self.print_on_newline(wrap("", join(modifiers, " "), " ") + f"{keyword} {name}")
        self.print(wrap(": ", join(inherited, ", ")))
        self.push_scope(ScopeFrame(name, keyword))
        self.open_block()

    def close_scope(self) -> ScopeFrame:
        """Print the closing brace of the innermost block and leave it."""
        self.close_block()
        return self.pop_scope()

    @contextmanager
    def declaration(
        self,
        keyword: str,
        name: str,
        modifiers: Sequence[str] = (),
        inherited: Sequence[Optional[str]] = (),
        description: Optional[str] = None,
    ) -> Iterator[None]:
        self.open_scope(keyword, name, modifiers, inherited, description)
        try:
            yield
        finally:
            self.close_scope()

    @contextmanager
    def namespace_declaration(self, namespace: Optional[str]) -> Iterator[None]:
        """Wrap the body in ``public enum <namespace>`` when a namespace is set."""
        if namespace:
            with self.declaration(
                "enum", namespace, ["public"], description=f"{namespace} namespace"
            ):
                yield
        else:
            yield

    def class_declaration(self, class_: Class):
        return self.declaration(
            "class",
            class_.class_name,
            class_.modifiers,
            [class_.super_class, *class_.adopted_protocols],
        )

    def struct_declaration(self, struct: Struct):
        return self.declaration(
            "struct",
            struct.struct_name,
            ["public"],
            struct.adopted_protocols,
            description=struct.description,
        )

    def protocol_declaration(self, protocol: Protocol):
        return self.declaration(
            "protocol", protocol.protocol_name, ["public"], protocol.adopted_protocols
        )

    # Properties

    def property_declaration(self, prop: Property) -> None:
        self.comment(prop.description)
        self.print_property(classify(prop.type), prop.property_name, prop.type_name)

    def property_declarations(self, properties: Optional[List[Property]]) -> None:
        if not properties:
            return
        for prop in properties:
            self.property_declaration(prop)

    def print_property(
        self,
        classified: ClassifiedType,
        property_name: str,
        type_name: Optional[str] = None,
    ) -> None:
        """
        Print the Realm stored property for a classified field type.

        Lists always become ``List<T>``. Optional numbers and booleans need
        ``RealmOptional`` boxes, while their required forms are plain dynamic
        vars with a zero default. An ``ID`` field additionally declares
        itself the primary key. Unknown scalars print a marker line instead
        of a declaration so the gap shows up in review.
        """
        type_name = type_name or self.type_mapper.root_type_name(classified)
        optional = classified.is_optional

        if classified.is_list:
            self.print_on_newline(f"let {property_name} = List<{type_name}>()")

        elif classified.kind == TypeKind.OBJECT:
            self.print_on_newline(f"dynamic var {property_name}: {type_name}?")

        elif classified.kind == TypeKind.ENUM:
            self.print_on_newline(f"dynamic var {property_name}: String? = nil")

        elif classified.kind == TypeKind.SCALAR:
            scalar_kind = classified.scalar_kind

            if scalar_kind == ScalarKind.BOOLEAN:
                if optional:
                    self.print_on_newline(f"let {property_name} = RealmOptional<Bool>()")
                else:
                    self.print_on_newline(f"dynamic var {property_name} = false")

            elif scalar_kind == ScalarKind.INT:
                if optional:
                    self.print_on_newline(f"let {property_name} = RealmOptional<Int>()")
                else:
                    self.print_on_newline(f"dynamic var {property_name} = 0")

            elif scalar_kind == ScalarKind.FLOAT:
                if optional:
                    self.print_on_newline(f"let {property_name} = RealmOptional<Float>()")
                else:
                    self.print_on_newline(f"dynamic var {property_name}: Float = 0.0")

            elif scalar_kind in (ScalarKind.STRING, ScalarKind.ID):
                if optional:
                    self.print_on_newline(f"dynamic var {property_name}: String? = nil")
                else:
                    self.print_on_newline(f'dynamic var {property_name} = ""')

                if scalar_kind == ScalarKind.ID:
                    self.primary_key_declaration(property_name)

            else:
                self.print_on_newline(f"UNCAUGHT SCALAR {classified.type_name}")

        # Interfaces and unions have no Realm representation

    def primary_key_declaration(self, property_name: str) -> None:
        self.print_on_newline("override public static func primaryKey() -> String?")
        with self.within_block():
            self.print_on_newline(f'return "{property_name.strip("`")}"')

    def protocol_property_declaration(self, prop: Property) -> None:
        self.print_on_newline(f"var {prop.property_name}: {prop.type_name} {{ get }}")

    def protocol_property_declarations(self, properties: Optional[List[Property]]) -> None:
        if not properties:
            return
        for prop in properties:
            self.protocol_property_declaration(prop)
