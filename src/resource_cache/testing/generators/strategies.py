"""Testing generators – Hypothesis strategies for cache values.

Requires the ``hypothesis`` package (``pip install "resource-cache[test]"``).
"""
from __future__ import annotations

import math
from typing import Any

import hypothesis.strategies as st

from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import UNDEFINED, Resource, ResourceStatus

_payloads = st.one_of(
    st.just(UNDEFINED),
    st.none(),
    st.integers(),
    st.text(max_size=10),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
)

_timestamps = st.floats(min_value=0, max_value=4e9, allow_nan=False, allow_infinity=False)


def identifier_strategy() -> "st.SearchStrategy[Identifier]":
    """Identifiers with a short category (or none) and a non-empty key."""
    return st.builds(
        Identifier,
        st.one_of(st.none(), st.sampled_from(["posts", "likes", "tags"])),
        st.text(min_size=1, max_size=12),
    )


def resource_strategy(payloads: "st.SearchStrategy[Any] | None" = None) -> "st.SearchStrategy[Resource]":
    """Resources in any reachable status.

    Example::

        @given(resource_strategy())
        def test_fail_keeps_data(resource):
            assert resource.fail("x").data is resource.data
    """
    payloads = payloads or _payloads
    return st.builds(
        Resource,
        status=st.sampled_from(list(ResourceStatus)),
        data=payloads,
        error=payloads,
        last_updated=st.one_of(st.just(-math.inf), _timestamps),
        last_attempt=st.one_of(st.none(), _timestamps),
        loaded=st.one_of(st.none(), st.integers(min_value=0, max_value=1000)),
        total=st.one_of(st.none(), st.integers(min_value=0, max_value=1000)),
    )


__all__ = ["identifier_strategy", "resource_strategy"]
