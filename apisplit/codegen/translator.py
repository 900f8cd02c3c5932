"""Translation of a document into split type files.

This module provides the TypesFileTranslator that ties the pipeline
together: the components translator builds the declaration tree, the
splitter flattens it into units and the assembler turns the units into
output-file descriptors.
"""

import logging
from typing import Any, Protocol

from apisplit.codegen.assembler import FileAssembler
from apisplit.codegen.components import ComponentsTranslator
from apisplit.codegen.declarations import CodeBlock, NamedFileDescription
from apisplit.codegen.diagnostics import DiagnosticCollector
from apisplit.codegen.splitting import UnitSplitter
from apisplit.config import SplitConfig

logger = logging.getLogger(__name__)

__all__ = ['ComponentsTranslating', 'TypesFileTranslator', 'translate_file']


class ComponentsTranslating(Protocol):
    def translate_components(self, document: Any) -> CodeBlock: ...


class TypesFileTranslator:
    """Translates a parsed document into one file per reusable type.

    The translator keeps no state between calls. It performs no I/O: the
    returned descriptors are handed to a renderer and a writer elsewhere.
    Without a caller-owned collector, every call reports into a fresh one.

    Attributes:
        config: Options of the translation run.
        components_translator: Builds the declaration tree of a document.
        diagnostics: Optional caller-owned collector receiving dropped-declaration
            notes and name collision warnings. It accumulates across calls.

    Example:
        >>> from apisplit.config import SplitConfig
        >>> translator = TypesFileTranslator(SplitConfig(namespace='API'))
        >>> files = translator.translate_file(document)
        >>> files[0].name
        'API.py'
    """

    def __init__(
        self,
        config: SplitConfig,
        components_translator: ComponentsTranslating | None = None,
        diagnostics: DiagnosticCollector | None = None,
    ):
        self.config = config
        self.components_translator = components_translator or ComponentsTranslator()
        self.diagnostics = diagnostics

    def translate_file(self, document: Any) -> list[NamedFileDescription]:
        """Translate a document into the ordered list of output files.

        Errors raised by the components translator propagate unchanged and
        no files are produced.
        """
        components = self.components_translator.translate_components(document)

        diagnostics = self.diagnostics
        if diagnostics is None:
            diagnostics = DiagnosticCollector()

        units = UnitSplitter(diagnostics).split(components)
        logger.debug(f'Split components into {len(units)} units')

        return FileAssembler(self.config, diagnostics).assemble(units)


def translate_file(
    document: Any,
    config: SplitConfig | None = None,
    components_translator: ComponentsTranslating | None = None,
) -> list[NamedFileDescription]:
    """Convenience function to translate a document with a fresh translator."""
    translator = TypesFileTranslator(
        config or SplitConfig(), components_translator=components_translator
    )
    return translator.translate_file(document)
