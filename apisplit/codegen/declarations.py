"""Structured declaration model consumed by the splitter.

This module provides:
- Declaration variants (struct, enum, protocol, annotation wrappers and the
  kinds the splitter does not emit on its own)
- CodeBlock, the single item placed in a generated file
- FileDescription and NamedFileDescription, the output-file descriptors

All types are frozen dataclasses, so a declaration tree can be shared between
translation runs without defensive copying.
"""

import dataclasses
from typing import Literal

__all__ = [
    'Declaration',
    'Struct',
    'Enum',
    'EnumCase',
    'Protocol',
    'AnnotatedDeclaration',
    'Commentable',
    'Deprecated',
    'Variable',
    'TypeAlias',
    'Function',
    'Extension',
    'Expression',
    'CodeBlock',
    'ImportDescription',
    'FileDescription',
    'NamedFileDescription',
]

AccessModifier = Literal['public', 'internal', 'private']


@dataclasses.dataclass(frozen=True)
class Declaration:
    """Base class of every declaration variant."""

    @property
    def kind(self) -> str:
        return type(self).__name__.lower()


@dataclasses.dataclass(frozen=True)
class EnumCase(Declaration):
    """A value case of an enum.

    Either a plain case, a case with a raw value (`raw_value`) or a case
    carrying a payload of another type (`associated_value`).
    """

    name: str
    raw_value: str | None = None
    associated_value: str | None = None


@dataclasses.dataclass(frozen=True)
class Variable(Declaration):
    name: str
    type_name: str | None = None
    default: str | None = None
    optional: bool = False


@dataclasses.dataclass(frozen=True)
class TypeAlias(Declaration):
    name: str
    existing_type: str


@dataclasses.dataclass(frozen=True)
class Function(Declaration):
    name: str
    parameters: tuple[Variable, ...] = ()
    return_type: str | None = None


@dataclasses.dataclass(frozen=True)
class Struct(Declaration):
    name: str
    members: tuple[Declaration, ...] = ()
    conformances: tuple[str, ...] = ()
    access_modifier: AccessModifier | None = 'public'


@dataclasses.dataclass(frozen=True)
class Enum(Declaration):
    """A sum type.

    Members are declarations: value cases are `EnumCase` instances, anything
    else is a nested declaration. An enum without value cases is only a
    grouping scope for its members.
    """

    name: str
    members: tuple[Declaration, ...] = ()
    conformances: tuple[str, ...] = ()
    access_modifier: AccessModifier | None = 'public'

    @property
    def cases(self) -> tuple[EnumCase, ...]:
        return tuple(m for m in self.members if isinstance(m, EnumCase))

    @property
    def has_cases(self) -> bool:
        return any(isinstance(m, EnumCase) for m in self.members)


@dataclasses.dataclass(frozen=True)
class Protocol(Declaration):
    name: str
    members: tuple[Declaration, ...] = ()
    conformances: tuple[str, ...] = ()
    access_modifier: AccessModifier | None = 'public'


@dataclasses.dataclass(frozen=True)
class Extension(Declaration):
    on_type: str
    members: tuple[Declaration, ...] = ()
    conformances: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class AnnotatedDeclaration(Declaration):
    """A declaration wrapped with a note that does not change its shape."""

    declaration: Declaration

    def rewrap(self, declaration: Declaration) -> 'AnnotatedDeclaration':
        """Return this annotation applied to a different declaration."""
        return dataclasses.replace(self, declaration=declaration)


@dataclasses.dataclass(frozen=True)
class Commentable(AnnotatedDeclaration):
    comment: str | None = None


@dataclasses.dataclass(frozen=True)
class Deprecated(AnnotatedDeclaration):
    message: str | None = None
    renamed: str | None = None


@dataclasses.dataclass(frozen=True)
class Expression:
    """A free-standing expression. Never becomes a file on its own."""

    source: str


@dataclasses.dataclass(frozen=True)
class CodeBlock:
    item: Declaration | Expression
    comment: str | None = None

    @property
    def declaration(self) -> Declaration | None:
        return self.item if isinstance(self.item, Declaration) else None


@dataclasses.dataclass(frozen=True)
class ImportDescription:
    module_name: str


@dataclasses.dataclass(frozen=True)
class FileDescription:
    top_comment: str | None
    imports: tuple[ImportDescription, ...]
    code_blocks: tuple[CodeBlock, ...]
    is_namespace: bool = False

    @property
    def import_names(self) -> list[str]:
        return [i.module_name for i in self.imports]


@dataclasses.dataclass(frozen=True)
class NamedFileDescription:
    """A generated file, ready to be rendered and written."""

    name: str
    contents: FileDescription
