"""
Prefect flows for the weather pipeline.

Flows:
- report: fetch current weather + forecast, run the analysis, return a report

Usage (local):
    python -m weatherwise.flows.report

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m weatherwise.flows.report
"""
