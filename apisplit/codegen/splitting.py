"""Splitting of a declaration tree into independent units.

A unit pairs a name with exactly one declaration and becomes exactly one
generated file. The splitter walks the tree in document order:

- structs, protocols and enums with value cases become a unit each, unchanged;
- enums without value cases are namespaces: their members are split in turn
  and the namespace itself disappears, names included;
- doc comment and deprecation wrappers are looked through, and the stripped
  wrapper is recorded on the resulting units;
- everything else (expressions, type aliases, variables, functions,
  extensions, stray enum cases) is dropped and reported as a diagnostic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apisplit.codegen.declarations import (
    AnnotatedDeclaration,
    CodeBlock,
    Declaration,
    Enum,
    Protocol,
    Struct,
)

if TYPE_CHECKING:
    from apisplit.codegen.diagnostics import DiagnosticCollector

logger = logging.getLogger(__name__)

__all__ = ['Unit', 'UnitSplitter', 'is_namespace', 'split_code_block']


@dataclass(frozen=True)
class Unit:
    """One flattened declaration destined for one output file.

    Attributes:
        name: Name the output file is derived from.
        block: Code block holding the declaration, without annotations.
        annotations: Wrappers stripped on the way down, outermost first.
    """

    name: str
    block: CodeBlock
    annotations: tuple[AnnotatedDeclaration, ...] = ()

    @property
    def declaration(self) -> Declaration:
        return self.block.item

    def annotated_declaration(self) -> Declaration:
        """Return the declaration with its stripped annotations re-applied."""
        declaration = self.declaration
        for annotation in reversed(self.annotations):
            declaration = annotation.rewrap(declaration)
        return declaration


def is_namespace(declaration: Declaration) -> bool:
    """Whether a declaration is an enum used only as a grouping scope."""
    return isinstance(declaration, Enum) and not declaration.has_cases


class UnitSplitter:
    """Flattens a declaration tree into an ordered list of units.

    Example:
        >>> splitter = UnitSplitter()
        >>> tree = Enum('Schemas', members=(Struct('Pet'), Struct('Error')))
        >>> [unit.name for unit in splitter.split(CodeBlock(tree))]
        ['Pet', 'Error']
    """

    def __init__(self, diagnostics: DiagnosticCollector | None = None):
        """Initialize the splitter.

        Args:
            diagnostics: Optional collector receiving a note for every
                dropped declaration or expression.
        """
        self.diagnostics = diagnostics

    def split(self, block: CodeBlock) -> list[Unit]:
        """Split a code block into units.

        Expression blocks produce no units.
        """
        declaration = block.declaration
        if declaration is None:
            self._dropped('expression', None, ())
            return []
        return self.split_declaration(declaration)

    def split_declaration(self, declaration: Declaration) -> list[Unit]:
        return self._split(declaration, (), ())

    def _split(
        self,
        declaration: Declaration,
        annotations: tuple[AnnotatedDeclaration, ...],
        scope: tuple[str, ...],
    ) -> list[Unit]:
        if isinstance(declaration, Struct):
            return [self._unit(declaration.name, declaration, annotations)]

        if isinstance(declaration, Enum):
            if declaration.has_cases:
                return [self._unit(declaration.name, declaration, annotations)]

            logger.debug(f'Flattening namespace {declaration.name}')
            inner_scope = scope + (declaration.name,)
            units: list[Unit] = []
            for member in declaration.members:
                units.extend(self._split(member, annotations, inner_scope))
            return units

        if isinstance(declaration, Protocol):
            return [self._unit(declaration.name, declaration, annotations)]

        if isinstance(declaration, AnnotatedDeclaration):
            return self._split(
                declaration.declaration, annotations + (declaration,), scope
            )

        # Kinds without a rule of their own.
        self._dropped(declaration.kind, getattr(declaration, 'name', None), scope)
        return []

    def _unit(
        self,
        name: str,
        declaration: Declaration,
        annotations: tuple[AnnotatedDeclaration, ...],
    ) -> Unit:
        return Unit(name=name, block=CodeBlock(declaration), annotations=annotations)

    def _dropped(self, kind: str, name: str | None, scope: tuple[str, ...]) -> None:
        if self.diagnostics is None:
            logger.debug(f'Dropped {kind} {name or ""}'.rstrip())
            return

        path = '.'.join(scope + (name,) if name else scope) or None
        self.diagnostics.note(f'Dropped {kind} without a file of its own', path)


def split_code_block(
    block: CodeBlock, diagnostics: DiagnosticCollector | None = None
) -> list[Unit]:
    """Convenience function to split a code block into units."""
    return UnitSplitter(diagnostics).split(block)
