"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for parsed API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return raw dicts; ``parse_*`` helpers turn them into
models and raise ``DataUnavailable`` when the payload is malformed.
"""
