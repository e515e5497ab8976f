"""Search engine layer — Drivers behind the host search abstraction.

Built-in engines:
  - elasticsearch: Elasticsearch v8+ (bulk indexing, query_string search)

Implement ``SearchEngine`` and register it with ``EngineManager.extend``
to plug in another backend.
"""
