import keyword
import re
import unicodedata
from urllib.parse import urlparse

__all__ = ('is_url', 'sanitize_identifier', 'sanitize_parameter_field_name')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except ValueError:
        return False


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def sanitize_name_python_keywords(name: str) -> str:
    if name in keyword.kwlist:
        return f'{name}_'
    return name


def sanitize_parameter_field_name(name: str) -> str:
    """Sanitize property or case names to be valid identifiers.

    - Replace spaces and hyphens with underscores
    - Remove other invalid characters
    - Ensure it doesn't start with a digit
    """
    if not name:
        raise ValueError('Name cannot be empty')

    sanitized = sanitize_name_python_keywords(name)
    sanitized = re.sub(r'[-\s]+', '_', remove_accents(sanitized))
    sanitized = re.sub(r'[^A-Za-z0-9_]', '', sanitized)

    if sanitized and sanitized[0].isdigit():
        sanitized = '_' + sanitized
    return sanitized


def sanitize_identifier(name: str) -> str:
    """Convert a schema name into a PascalCase type identifier.

    Unit and file names are derived from these identifiers, so two schema
    names that sanitize to the same identifier end up in colliding files.
    """
    if not name:
        return 'UnnamedType'

    parts = re.sub(r'[^A-Za-z0-9]+', '_', remove_accents(name)).split('_')

    if len(parts) == 1:
        sanitized = capitalize(parts[0])
    else:
        sanitized = ''.join(capitalize(part) for part in parts if part)

    if sanitized and sanitized[0].isdigit():
        sanitized = '_' + sanitized

    return sanitized or 'UnnamedType'
