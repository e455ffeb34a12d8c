"""Testing generators – property-based strategies (import explicitly).

Kept out of ``resource_cache.testing`` so the fakes work without
``hypothesis`` installed::

    from resource_cache.testing.generators.strategies import resource_strategy
"""
