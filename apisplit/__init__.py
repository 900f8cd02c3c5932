"""apisplit - Split the reusable types of an OpenAPI document into one file each.

apisplit translates the components of an OpenAPI document into a tree of
declarations, flattens the namespaces of that tree and produces one
output-file descriptor per type, with a shared header and an optional root
namespace.

Quick Start:
    >>> from apisplit import SchemaLoader, SplitConfig, TypesFileTranslator
    >>>
    >>> document = SchemaLoader().load('./openapi.yaml')
    >>> translator = TypesFileTranslator(SplitConfig(namespace='API'))
    >>> [f.name for f in translator.translate_file(document)]
    ['API.py', 'API_Pet.py', 'API_Error.py']

CLI Usage:
    $ apisplit plan ./openapi.yaml --namespace API
    $ apisplit plan --config apisplit.yaml
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from apisplit.codegen import (
    ComponentsTranslator,
    FileAssembler,
    SchemaLoader,
    TypesFileTranslator,
    Unit,
    UnitSplitter,
    translate_file,
)
from apisplit.config import CodegenConfig, DocumentConfig, SplitConfig, get_config
from apisplit.exceptions import (
    ApiSplitError,
    ConfigurationError,
    SchemaError,
    SchemaLoadError,
    SchemaValidationError,
    TranslationError,
    UnsupportedFeatureError,
)

__all__ = [
    # Main classes
    'TypesFileTranslator',
    'ComponentsTranslator',
    'UnitSplitter',
    'Unit',
    'FileAssembler',
    'SchemaLoader',
    'translate_file',
    # Configuration
    'SplitConfig',
    'DocumentConfig',
    'CodegenConfig',
    'get_config',
    # Exceptions
    'ApiSplitError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'TranslationError',
    'UnsupportedFeatureError',
    'ConfigurationError',
]

try:
    __version__ = _package_version('apisplit')
except PackageNotFoundError:
    __version__ = 'unknown'
