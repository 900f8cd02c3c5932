"""Assembly of split units into output-file descriptors.

Every unit becomes one file holding exactly one code block, preceded by a
header shared by the whole run. When a root namespace is configured, an
anchor file declaring the empty namespace comes first and every other file
name is prefixed with the namespace.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apisplit.codegen.declarations import (
    CodeBlock,
    Enum,
    FileDescription,
    ImportDescription,
    NamedFileDescription,
)

if TYPE_CHECKING:
    from apisplit.codegen.diagnostics import DiagnosticCollector
    from apisplit.codegen.splitting import Unit
    from apisplit.config import SplitConfig

logger = logging.getLogger(__name__)

__all__ = ['TOP_COMMENT', 'BUILTIN_IMPORTS', 'FileHeader', 'FileAssembler']

TOP_COMMENT = 'Generated by apisplit, do not modify.'

BUILTIN_IMPORTS: tuple[str, ...] = ('typing', 'pydantic')


@dataclass(frozen=True)
class FileHeader:
    top_comment: str
    imports: tuple[ImportDescription, ...]


class FileAssembler:
    """Builds the output files for one translation run.

    Example:
        >>> from apisplit.config import SplitConfig
        >>> assembler = FileAssembler(SplitConfig(namespace='API'))
        >>> [f.name for f in assembler.assemble(units)]
        ['API.py', 'API_Error.py']
    """

    def __init__(
        self,
        config: SplitConfig,
        diagnostics: DiagnosticCollector | None = None,
    ):
        self.config = config
        self.diagnostics = diagnostics

    def header(self) -> FileHeader:
        """Header shared by every unit file of the run.

        Additional imports follow the built-in ones in configured order and
        are not deduplicated.
        """
        names = list(BUILTIN_IMPORTS) + list(self.config.additional_imports)
        return FileHeader(
            top_comment=TOP_COMMENT,
            imports=tuple(ImportDescription(module_name=n) for n in names),
        )

    def file_name(self, unit_name: str) -> str:
        prefix = f'{self.config.namespace}_' if self.config.namespace else ''
        return f'{prefix}{unit_name}.{self.config.file_extension}'

    def anchor_file(self) -> NamedFileDescription | None:
        """The namespace declaration file, or None without a namespace.

        The anchor declares nothing but the empty namespace and imports
        nothing.
        """
        namespace = self.config.namespace
        if not namespace:
            return None

        contents = FileDescription(
            top_comment=TOP_COMMENT,
            imports=(),
            code_blocks=(CodeBlock(Enum(name=namespace)),),
            is_namespace=True,
        )
        return NamedFileDescription(
            name=f'{namespace}.{self.config.file_extension}', contents=contents
        )

    def unit_file(self, unit: Unit, header: FileHeader) -> NamedFileDescription:
        block = unit.block
        if self.config.preserve_annotations and unit.annotations:
            block = CodeBlock(unit.annotated_declaration(), comment=block.comment)

        contents = FileDescription(
            top_comment=header.top_comment,
            imports=header.imports,
            code_blocks=(block,),
        )
        return NamedFileDescription(name=self.file_name(unit.name), contents=contents)

    def assemble(self, units: list[Unit]) -> list[NamedFileDescription]:
        """Build the ordered list of files for the given units.

        Returns:
            The anchor file (when a namespace is configured) followed by one
            file per unit, in unit order.
        """
        header = self.header()
        files: list[NamedFileDescription] = []

        anchor = self.anchor_file()
        if anchor is not None:
            files.append(anchor)

        files.extend(self.unit_file(unit, header) for unit in units)

        self._report_collisions(files)
        return files

    def _report_collisions(self, files: list[NamedFileDescription]) -> None:
        counts = Counter(f.name for f in files)
        for name, count in counts.items():
            if count < 2:
                continue
            message = f'{count} files share the name {name}'
            if self.diagnostics is not None:
                self.diagnostics.warning(message, context=name)
            else:
                logger.warning(message)
