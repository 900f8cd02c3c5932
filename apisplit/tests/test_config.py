"""Test configuration for apisplit package."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from apisplit.config import (
    CodegenConfig,
    DocumentConfig,
    SplitConfig,
    get_config,
    load_json,
    load_yaml,
)
from apisplit.exceptions import ConfigurationError


class TestSplitConfig:
    """Test SplitConfig model."""

    def test_defaults(self):
        """Test the default options."""
        config = SplitConfig()
        assert config.namespace is None
        assert config.additional_imports == []
        assert config.file_extension == 'py'
        assert config.preserve_annotations is False

    def test_namespace_must_be_identifier(self):
        """Test that a namespace with invalid characters is rejected."""
        with pytest.raises(ValidationError):
            SplitConfig(namespace='my-api')

    def test_extension_dot_is_stripped(self):
        """Test that a leading dot in the extension is removed."""
        assert SplitConfig(file_extension='.swift').file_extension == 'swift'

    def test_empty_extension_is_rejected(self):
        """Test that an empty extension is rejected."""
        with pytest.raises(ValidationError):
            SplitConfig(file_extension='.')

    def test_additional_imports_keep_order(self):
        """Test that import order and duplicates are kept."""
        config = SplitConfig(additional_imports=['b', 'a', 'b'])
        assert config.additional_imports == ['b', 'a', 'b']


class TestDocumentConfig:
    """Test DocumentConfig model."""

    def test_valid_document_config(self):
        """Test creating a valid DocumentConfig."""
        config = DocumentConfig(source='./openapi.yaml', namespace='API')
        assert config.source == './openapi.yaml'
        assert config.namespace == 'API'

    def test_document_config_validation(self):
        """Test that source is required."""
        with pytest.raises(ValidationError):
            DocumentConfig()


class TestCodegenConfig:
    """Test CodegenConfig model."""

    def test_multiple_documents(self):
        """Test CodegenConfig with multiple documents."""
        config = CodegenConfig(
            documents=[
                DocumentConfig(source='api1.json'),
                DocumentConfig(source='api2.json', namespace='Second'),
            ]
        )
        assert len(config.documents) == 2
        assert config.documents[1].namespace == 'Second'

    def test_codegen_config_validation(self):
        """Test that documents is required."""
        with pytest.raises(ValidationError):
            CodegenConfig()


class TestGetConfig:
    """Test get_config function."""

    def test_get_config_with_yaml_file(self):
        """Test loading config from an explicit YAML file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'custom.yaml'
            path.write_text(
                'documents:\n'
                '  - source: ./openapi.yaml\n'
                '    namespace: API\n'
                '    additional_imports: [uuid]\n'
            )

            config = get_config(str(path))

        assert config.documents[0].namespace == 'API'
        assert config.documents[0].additional_imports == ['uuid']

    def test_get_config_with_json_file(self):
        """Test loading config from an explicit JSON file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'custom.json'
            path.write_text('{"documents": [{"source": "api.json"}]}')

            config = get_config(str(path))

        assert config.documents[0].source == 'api.json'

    def test_get_config_missing_explicit_file(self):
        """Test that a missing explicit file is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_config('/nonexistent/apisplit.yaml')

        assert exc_info.value.config_path == '/nonexistent/apisplit.yaml'

    def test_get_config_default_filename(self):
        """Test discovery of apisplit.yaml in the working directory."""
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, 'apisplit.yaml').write_text('documents:\n  - source: a.yaml\n')

            with patch('os.getcwd', return_value=tmp):
                config = get_config()

        assert config.documents[0].source == 'a.yaml'

    def test_get_config_from_pyproject(self):
        """Test discovery of the [tool.apisplit] table."""
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, 'pyproject.toml').write_text(
                '[[tool.apisplit.documents]]\nsource = "spec.json"\nnamespace = "API"\n'
            )

            with patch('os.getcwd', return_value=tmp):
                config = get_config()

        assert config.documents[0].namespace == 'API'

    def test_get_config_not_found(self):
        """Test that no configuration at all is a configuration error."""
        with tempfile.TemporaryDirectory() as tmp:
            with patch('os.getcwd', return_value=tmp):
                with pytest.raises(ConfigurationError):
                    get_config()

    def test_get_config_malformed_yaml(self):
        """Test that unparsable YAML is a configuration error."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'apisplit.yaml')
            Path(path).write_text('documents: [\n  - source: x\n')

            with pytest.raises(ConfigurationError) as exc_info:
                get_config(path)

        assert exc_info.value.config_path == path
        assert 'Malformed configuration file' in str(exc_info.value)

    def test_get_config_malformed_pyproject(self):
        """Test that an unparsable pyproject.toml is a configuration error."""
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, 'pyproject.toml').write_text('[tool.apisplit\nsource = ')

            with patch('os.getcwd', return_value=tmp):
                with pytest.raises(ConfigurationError) as exc_info:
                    get_config()

        assert exc_info.value.config_path == str(Path(tmp, 'pyproject.toml'))


class TestLoaders:
    """Test the raw file loaders."""

    def test_load_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'c.yaml')
            Path(path).write_text('a: 1\n')
            assert load_yaml(path) == {'a': 1}

    def test_load_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'c.json')
            Path(path).write_text('{"a": 1}')
            assert load_json(path) == {'a': 1}
