"""Schema loading utilities for OpenAPI documents.

This module provides utilities for loading OpenAPI documents from URLs or
local file paths, in JSON or YAML, validated with ``openapi_pydantic``.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml
from openapi_pydantic import parse_obj

from apisplit.codegen.utils import is_url
from apisplit.exceptions import SchemaLoadError, SchemaValidationError

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Loads OpenAPI documents from URLs or file paths.

    Example:
        >>> loader = SchemaLoader()
        >>> document = loader.load('https://api.example.com/openapi.json')
        >>> # or
        >>> document = loader.load('/path/to/openapi.yaml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> Any:
        """Load and validate an OpenAPI document from a URL or file path.

        Returns:
            The parsed ``openapi_pydantic`` document (v3.0 or v3.1 model).

        Raises:
            SchemaLoadError: If the document cannot be read or parsed.
            SchemaValidationError: If the document is not valid OpenAPI.
        """
        if is_url(source):
            content = self._load_from_url(source)
        else:
            content = self._load_from_file(source)

        return self.validate(content, source)

    def validate(self, content: Any, source: str = '<memory>') -> Any:
        if not isinstance(content, dict):
            raise SchemaValidationError(
                source, errors=['document root must be a mapping']
            )

        try:
            return parse_obj(content)
        except Exception as e:
            raise SchemaValidationError(source, errors=[str(e)])

    def _load_from_url(self, url: str) -> Any:
        logger.debug(f'Fetching {url}')
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            return json.loads(content)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)
