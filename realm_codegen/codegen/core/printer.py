"""
Text buffer with indentation and scope tracking.

Language generators subclass CodePrinter and build declarations on top
of the primitives here.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional


class PrinterError(Exception):
    """Raised when the printer's scope stack is misused."""

    pass


@dataclass(frozen=True)
class ScopeFrame:
    """One open declaration block."""

    type_name: str
    keyword: str = ""


class CodePrinter:
    """Append-only output buffer with an indentation level and scope stack."""

    def __init__(self, indent_width: int = 2, use_tabs: bool = False):
        self.indent_width = indent_width
        self.use_tabs = use_tabs
        self.reset()

    def reset(self) -> None:
        """Start over with an empty buffer and scope stack."""
        self.output = ""
        self.indent_level = 0
        self.start_of_indent_level = False
        self._scope_stack: List[ScopeFrame] = []

    # Scope stack

    def push_scope(self, frame: ScopeFrame) -> None:
        self._scope_stack.append(frame)

    def pop_scope(self) -> ScopeFrame:
        if not self._scope_stack:
            raise PrinterError("pop_scope called with no open scope")
        return self._scope_stack.pop()

    @property
    def scope(self) -> ScopeFrame:
        """Innermost open scope."""
        if not self._scope_stack:
            raise PrinterError("No active scope")
        return self._scope_stack[-1]

    @property
    def scope_depth(self) -> int:
        return len(self._scope_stack)

    def qualified_name(self, name: str) -> str:
        """Qualify ``name`` with every open scope, outermost first."""
        return ".".join([frame.type_name for frame in self._scope_stack] + [name])

    # Printing

    def print(self, text: Optional[str] = None) -> None:
        if text:
            self.output += text

    def print_newline(self) -> None:
        """End the current line; a no-op while the buffer is empty."""
        if self.output:
            self.print("\n")
            self.start_of_indent_level = False

    def print_newline_if_needed(self) -> None:
        """Leave a blank line unless a block was just opened."""
        if not self.start_of_indent_level:
            self.print_newline()

    def print_on_newline(self, text: Optional[str]) -> None:
        if text:
            self.print_newline()
            self.print_indent()
            self.print(text)

    def print_indent(self) -> None:
        if self.use_tabs:
            self.output += "\t" * self.indent_level
        else:
            self.output += " " * (self.indent_level * self.indent_width)

    def indent(self) -> None:
        self.indent_level += 1
        self.start_of_indent_level = True

    def dedent(self) -> None:
        if self.indent_level == 0:
            raise PrinterError("dedent called at indent level 0")
        self.indent_level -= 1

    @contextmanager
    def with_indent(self) -> Iterator[None]:
        self.indent()
        try:
            yield
        finally:
            self.dedent()

    def open_block(self, open_: str = " {") -> None:
        self.print(open_)
        self.indent()

    def close_block(self, close: str = "}") -> None:
        self.dedent()
        self.print_on_newline(close)

    @contextmanager
    def within_block(self, open_: str = " {", close: str = "}") -> Iterator[None]:
        """Print ``open_``, indent the body, then print ``close`` on its own line."""
        self.open_block(open_)
        try:
            yield
        finally:
            self.close_block(close)

    @contextmanager
    def scoped_block(self, frame: ScopeFrame) -> Iterator[None]:
        """Open a braced block tracked on the scope stack."""
        self.push_scope(frame)
        try:
            with self.within_block():
                yield
        finally:
            self.pop_scope()
