"""External data source integrations.

Each subdirectory is one provider with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, provider lookup tables
    ├── models.py         # Dataclasses for raw API responses
    ├── fetch.py          # HTTP retrieval and decoding
    └── {feature}.py      # Normalization into daycast.schemas models

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``forecastio/`` for a complete example.

2. Decode responses into dataclasses, then normalize them into
   ``Condition`` / ``DayBucket`` / ``WeatherData``::

       from daycast.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}_*.py``.
"""
