"""
Stores Package

Plan and pantry stores behind a common interface, with SQL and REST
(PostgREST) implementations.
"""

from .base import PlanStore, PantryStore, UpstreamFetchError
from .sql import SqlPlanStore, SqlPantryStore
from .rest import RestClient, RestPlanStore, RestPantryStore


def build_stores(config):
    """Create (plan_store, pantry_store) for the configured STORE_BACKEND."""
    backend = config.get('STORE_BACKEND', 'sql')
    if backend == 'sql':
        return SqlPlanStore(), SqlPantryStore()
    if backend == 'rest':
        client = RestClient(config.get('SUPABASE_URL'), config.get('SUPABASE_KEY'),
                            timeout=config.get('STORE_TIMEOUT', 10.0))
        return RestPlanStore(client), RestPantryStore(client)
    raise ValueError(f"Unknown STORE_BACKEND: {backend}")


__all__ = [
    'PlanStore',
    'PantryStore',
    'UpstreamFetchError',
    'SqlPlanStore',
    'SqlPantryStore',
    'RestClient',
    'RestPlanStore',
    'RestPantryStore',
    'build_stores',
]
