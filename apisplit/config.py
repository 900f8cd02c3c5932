import json
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apisplit.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['apisplit.yaml', 'apisplit.yml']


class SplitConfig(BaseModel):
    """Options for one translation run."""

    namespace: str | None = Field(
        None,
        description='Optional root namespace. Prefixes every file name and adds an anchor file.',
    )

    additional_imports: list[str] = Field(
        default_factory=list,
        description='Imports added after the built-in imports of every generated file.',
    )

    file_extension: str = Field(
        'py', description='Extension of the generated file names, without the dot.'
    )

    preserve_annotations: bool = Field(
        False,
        description='Re-attach doc comments and deprecations stripped while splitting.',
    )

    @field_validator('namespace')
    @classmethod
    def _check_namespace(cls, value: str | None) -> str | None:
        if value is not None and not value.isidentifier():
            raise ValueError(f'namespace must be a valid identifier, got {value!r}')
        return value

    @field_validator('file_extension')
    @classmethod
    def _check_extension(cls, value: str) -> str:
        value = value.lstrip('.')
        if not value:
            raise ValueError('file_extension cannot be empty')
        return value


class DocumentConfig(SplitConfig):
    """Represents a single document to be processed."""

    source: str = Field(..., description='Path or URL to the OpenAPI document.')


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='APISPLIT_')

    documents: list[DocumentConfig] = Field(
        ..., description='List of OpenAPI documents to process.'
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text())


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load_file(path: str | Path) -> dict:
    import tomllib

    import yaml

    path = Path(path)
    if not path.exists():
        raise ConfigurationError('Configuration file not found', config_path=str(path))

    try:
        if path.suffix.lower() == '.json':
            return load_json(path)
        if path.suffix.lower() == '.toml':
            return tomllib.loads(path.read_text())
        return load_yaml(path)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f'Malformed configuration file: {e}', config_path=str(path)
        )
    except OSError as e:
        raise ConfigurationError(
            f'Unreadable configuration file: {e}', config_path=str(path)
        )


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or the current project."""
    if path:
        return CodegenConfig.model_validate(_load_file(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return CodegenConfig.model_validate(_load_file(path))

    path = Path(cwd) / 'pyproject.toml'

    if path.exists():
        pyproject = _load_file(path)
        tools = pyproject.get('tool', {})

        if 'apisplit' in tools:
            return CodegenConfig.model_validate(tools['apisplit'])

    raise ConfigurationError(
        f'No configuration found; expected one of {", ".join(DEFAULT_FILENAMES)} '
        'or a [tool.apisplit] table in pyproject.toml',
        config_path=cwd,
    )
