"""Supply-air grill pairing bounded context (DDD layered package).

This package is intentionally split into:
- domain: pure value objects, the connector pairing engine, discovery
- application: use-cases (orchestration)
- infrastructure: numeric backend and IO adapters (JSON, plots)
- entrypoints: composition roots and the CLI

Importing the package is side-effect free; use explicit imports, e.g.
`from grill_pairing.entrypoints.pairing import create_pairings`.
"""

__all__: list[str] = []
