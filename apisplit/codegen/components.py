"""Translation of OpenAPI components into a declaration tree.

The reusable schemas of a document end up nested inside two namespaces,
``Components`` and ``Schemas``, which the splitter later flattens away:

    Enum Components
      Enum Schemas
        Struct Pet
        Enum Status (cases available, sold)
        ...
"""

import logging
from enum import Enum as PyEnum
from typing import Any

from apisplit.codegen.declarations import (
    CodeBlock,
    Commentable,
    Declaration,
    Deprecated,
    Enum,
    EnumCase,
    Struct,
    TypeAlias,
    Variable,
)
from apisplit.codegen.utils import sanitize_identifier, sanitize_parameter_field_name
from apisplit.exceptions import TranslationError, UnsupportedFeatureError

logger = logging.getLogger(__name__)

__all__ = ['ComponentsTranslator', 'LOCAL_SCHEMA_PREFIX']

LOCAL_SCHEMA_PREFIX = '#/components/schemas/'

_PRIMITIVE_TYPE_MAP = {
    ('string', None): 'str',
    ('string', 'date-time'): 'datetime',
    ('string', 'date'): 'date',
    ('string', 'uuid'): 'UUID',
    ('string', 'binary'): 'bytes',
    ('integer', None): 'int',
    ('number', None): 'float',
    ('boolean', None): 'bool',
    ('null', None): 'None',
}


def _data_types(schema: Any) -> list[str]:
    """Return the declared types of a schema as plain strings."""
    declared = getattr(schema, 'type', None)
    if declared is None:
        return []
    if not isinstance(declared, list):
        declared = [declared]
    return [t.value if isinstance(t, PyEnum) else str(t) for t in declared]


def _primary_type(schema: Any) -> str | None:
    types = [t for t in _data_types(schema) if t != 'null']
    return types[0] if types else None


def _ref(schema: Any) -> str | None:
    return getattr(schema, 'ref', None)


def _case_name(value: str) -> str:
    if not value:
        return 'empty'
    return sanitize_parameter_field_name(value[0].lower() + value[1:]) or 'empty'


class ComponentsTranslator:
    """Translates ``components.schemas`` of a parsed OpenAPI document.

    Works with the v3.0 and v3.1 models of ``openapi_pydantic``.

    Example:
        >>> from openapi_pydantic import parse_obj
        >>> document = parse_obj(spec_dict)
        >>> block = ComponentsTranslator().translate_components(document)
    """

    def __init__(self):
        self._schemas: dict[str, Any] = {}

    def translate_components(self, document: Any) -> CodeBlock:
        """Build the ``Components`` namespace for a document.

        Raises:
            UnsupportedFeatureError: If a schema references another document.
            TranslationError: If a local reference points to a missing schema.
        """
        components = getattr(document, 'components', None)
        self._schemas = dict(getattr(components, 'schemas', None) or {})

        members = tuple(
            self.translate_schema(name, schema) for name, schema in self._schemas.items()
        )
        schemas = Enum(name='Schemas', members=members)
        return CodeBlock(Enum(name='Components', members=(schemas,)))

    def translate_schema(self, name: str, schema: Any) -> Declaration:
        """Translate one named schema into a declaration."""
        type_name = sanitize_identifier(name)
        declaration = self._translate_body(type_name, schema, context=name)

        if getattr(schema, 'deprecated', False):
            declaration = Deprecated(declaration=declaration)

        description = getattr(schema, 'description', None)
        if description:
            declaration = Commentable(declaration=declaration, comment=description)

        return declaration

    def _translate_body(self, type_name: str, schema: Any, context: str) -> Declaration:
        if _ref(schema) is not None:
            return TypeAlias(
                name=type_name, existing_type=self.type_name(schema, context)
            )

        alternatives = getattr(schema, 'oneOf', None) or getattr(schema, 'anyOf', None)
        if alternatives:
            return self._translate_union(type_name, alternatives, context)

        data_type = _primary_type(schema)
        enum_values = getattr(schema, 'enum', None)

        if enum_values and data_type in (None, 'string'):
            cases = tuple(
                EnumCase(name=_case_name(str(v)), raw_value=str(v))
                for v in enum_values
                if v is not None
            )
            return Enum(name=type_name, members=cases, conformances=('str',))

        if data_type == 'object' or getattr(schema, 'properties', None):
            return self._translate_object(type_name, schema, context)

        logger.debug(f'Translating {context} to a type alias')
        return TypeAlias(name=type_name, existing_type=self.type_name(schema, context))

    def _translate_object(self, type_name: str, schema: Any, context: str) -> Struct:
        required = set(getattr(schema, 'required', None) or [])
        properties = getattr(schema, 'properties', None) or {}

        members = tuple(
            Variable(
                name=sanitize_parameter_field_name(prop_name),
                type_name=self.type_name(prop_schema, f'{context}.{prop_name}'),
                optional=prop_name not in required,
            )
            for prop_name, prop_schema in properties.items()
        )
        return Struct(name=type_name, members=members, conformances=('BaseModel',))

    def _translate_union(
        self, type_name: str, alternatives: list[Any], context: str
    ) -> Enum:
        cases = []
        for index, alternative in enumerate(alternatives):
            payload = self.type_name(alternative, context)
            case_name = _case_name(payload) if _ref(alternative) else f'case{index + 1}'
            cases.append(EnumCase(name=case_name, associated_value=payload))
        return Enum(name=type_name, members=tuple(cases))

    def type_name(self, schema: Any, context: str) -> str:
        """Return the type name used to refer to a schema."""
        ref = _ref(schema)
        if ref is not None:
            return self._resolve_reference(ref, context)

        data_type = _primary_type(schema)
        if data_type == 'array':
            items = getattr(schema, 'items', None)
            inner = self.type_name(items, context) if items is not None else 'Any'
            return f'list[{inner}]'

        if data_type == 'object':
            return 'dict[str, Any]'

        if data_type in ('integer', 'number', 'boolean', 'null'):
            return _PRIMITIVE_TYPE_MAP[(data_type, None)]

        if data_type == 'string':
            key = ('string', getattr(schema, 'schema_format', None))
            return _PRIMITIVE_TYPE_MAP.get(key, 'str')

        return 'Any'

    def _resolve_reference(self, ref: str, context: str) -> str:
        if not ref.startswith('#'):
            raise UnsupportedFeatureError(
                f"external reference '{ref}'",
                suggestion='Bundle the document into a single file first',
                context=context,
            )
        if not ref.startswith(LOCAL_SCHEMA_PREFIX):
            raise UnsupportedFeatureError(
                f"reference outside components.schemas '{ref}'", context=context
            )

        schema_name = ref[len(LOCAL_SCHEMA_PREFIX) :]
        if schema_name not in self._schemas:
            raise TranslationError(
                f"Referenced schema '{schema_name}' not found in components.schemas",
                context=context,
            )
        return sanitize_identifier(schema_name)
