"""Test fixtures for apisplit tests.

This module provides sample OpenAPI documents for testing the translation
and splitting functionality.
"""

# Minimal OpenAPI 3.0 spec without components
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# A single error schema
ERROR_SPEC = {
    'openapi': '3.1.0',
    'info': {'title': 'Error API', 'version': '1.0.0'},
    'paths': {},
    'components': {
        'schemas': {
            'Error': {
                'type': 'object',
                'required': ['code', 'message'],
                'properties': {
                    'code': {'type': 'integer', 'format': 'int32'},
                    'message': {'type': 'string'},
                },
            }
        }
    },
}

# Petstore-like spec covering every schema shape the translator handles
PETSTORE_SPEC = {
    'openapi': '3.1.0',
    'info': {'title': 'Petstore', 'version': '1.0.0'},
    'paths': {},
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'description': 'A pet for sale in the pet store',
                'required': ['id', 'name'],
                'properties': {
                    'id': {'type': 'integer', 'format': 'int64'},
                    'name': {'type': 'string'},
                    'status': {'$ref': '#/components/schemas/PetStatus'},
                    'tags': {
                        'type': 'array',
                        'items': {'$ref': '#/components/schemas/Tag'},
                    },
                    'born-at': {'type': 'string', 'format': 'date-time'},
                },
            },
            'PetStatus': {
                'type': 'string',
                'enum': ['available', 'pending', 'sold'],
            },
            'Tag': {
                'type': 'object',
                'properties': {
                    'id': {'type': 'integer'},
                    'name': {'type': 'string'},
                },
            },
            'TagList': {
                'type': 'array',
                'items': {'$ref': '#/components/schemas/Tag'},
            },
            'LegacyPet': {
                'type': 'object',
                'deprecated': True,
                'properties': {'id': {'type': 'integer'}},
            },
            'PetOrTag': {
                'oneOf': [
                    {'$ref': '#/components/schemas/Pet'},
                    {'$ref': '#/components/schemas/Tag'},
                ]
            },
            'Error': {
                'type': 'object',
                'properties': {
                    'code': {'type': 'integer'},
                    'message': {'type': 'string'},
                },
            },
        }
    },
}

# Schema referencing a missing component
BROKEN_REFERENCE_SPEC = {
    'openapi': '3.1.0',
    'info': {'title': 'Broken API', 'version': '1.0.0'},
    'paths': {},
    'components': {
        'schemas': {
            'Owner': {
                'type': 'object',
                'properties': {'pet': {'$ref': '#/components/schemas/Missing'}},
            }
        }
    },
}

# Schema referencing another document
EXTERNAL_REFERENCE_SPEC = {
    'openapi': '3.1.0',
    'info': {'title': 'External API', 'version': '1.0.0'},
    'paths': {},
    'components': {
        'schemas': {
            'Owner': {
                'type': 'object',
                'properties': {'pet': {'$ref': 'pets.yaml#/Pet'}},
            }
        }
    },
}
