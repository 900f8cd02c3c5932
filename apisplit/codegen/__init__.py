"""Code generation module for apisplit.

This module provides the pipeline turning an OpenAPI document into one
output-file descriptor per reusable type.

Main Components:
    - TypesFileTranslator: The orchestrator of a translation run
    - ComponentsTranslator: Builds the declaration tree of a document
    - UnitSplitter: Flattens the declaration tree into units
    - FileAssembler: Wraps units into output-file descriptors
    - SchemaLoader: Loads OpenAPI documents from URLs or files

Example:
    >>> from apisplit.codegen import SchemaLoader, TypesFileTranslator
    >>> from apisplit.config import SplitConfig
    >>>
    >>> document = SchemaLoader().load('./openapi.yaml')
    >>> files = TypesFileTranslator(SplitConfig(namespace='API')).translate_file(document)
"""

from apisplit.codegen.assembler import (
    BUILTIN_IMPORTS,
    TOP_COMMENT,
    FileAssembler,
    FileHeader,
)
from apisplit.codegen.components import ComponentsTranslator
from apisplit.codegen.declarations import (
    AnnotatedDeclaration,
    CodeBlock,
    Commentable,
    Declaration,
    Deprecated,
    Enum,
    EnumCase,
    Expression,
    Extension,
    FileDescription,
    Function,
    ImportDescription,
    NamedFileDescription,
    Protocol,
    Struct,
    TypeAlias,
    Variable,
)
from apisplit.codegen.diagnostics import Diagnostic, DiagnosticCollector, Severity
from apisplit.codegen.schema_loader import SchemaLoader
from apisplit.codegen.splitting import (
    Unit,
    UnitSplitter,
    is_namespace,
    split_code_block,
)
from apisplit.codegen.translator import (
    ComponentsTranslating,
    TypesFileTranslator,
    translate_file,
)

__all__ = [
    # Orchestration
    'TypesFileTranslator',
    'ComponentsTranslating',
    'translate_file',
    'ComponentsTranslator',
    'SchemaLoader',
    # Splitting
    'Unit',
    'UnitSplitter',
    'is_namespace',
    'split_code_block',
    # Assembly
    'FileAssembler',
    'FileHeader',
    'TOP_COMMENT',
    'BUILTIN_IMPORTS',
    # Diagnostics
    'Diagnostic',
    'DiagnosticCollector',
    'Severity',
    # Declarations
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
