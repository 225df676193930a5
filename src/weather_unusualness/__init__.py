"""Weather Unusualness - how unusual is today's forecast high?

Architecture::

    datasources/   External APIs (Open-Meteo forecast and archive)
    store.py       JSON cache with TTL for the historical archive
    analysis/      Window filtering, summary statistics, z-score rating
    renderers/     Pure data → HTML (summary card, distribution chart)
    flows/         Prefect orchestration (fetch, analyze, write site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → store (cache) → analysis → renderers → derived/site/
"""

__version__ = "0.1.0"

from weather_unusualness.config import Settings

__all__ = ["Settings", "__version__"]
