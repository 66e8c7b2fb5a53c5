"""
Prefect flows.

Flows:
- forecast: Fetch current conditions + N days for a location and summarize

Usage (local):
    python -m daycast.flows.forecast 40.748,-73.985

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'forecast/default'
"""
