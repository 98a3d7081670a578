"""League Reporting API - match analytics service.

Hexagonal layout around the ``match_reporting`` engine.

Layers:
- application: Use cases and port interfaces
- infrastructure: Adapters for match data sources and report listeners
- api: REST endpoints and response transformers
"""

__version__ = "1.0.0"
