"""
Prefect flows for the analysis pipeline.

Flows:
- analyze: fetch today's forecast high and the historical archive,
  rate today's high, and write the static result page

Usage (local):
    python -m weather_unusualness.flows.analyze

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weather_unusualness.flows.analyze
"""
