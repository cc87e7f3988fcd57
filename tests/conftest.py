"""Shared fixtures.

``PYITERATE_TEST_VARIANT`` picks the resolver under test ("standard" or
"native"); both must pass the same suite.
"""

import os

import pytest
from hypothesis import HealthCheck, settings

from pyiterate.core.iterators import drain
from pyiterate.environment import set_environment
from pyiterate.logging import PyIterateLogger, set_logger
from pyiterate.reporting.formatters import inspect_value
from pyiterate.resolver import Resolver, set_resolver

VARIANT = os.environ.get("PYITERATE_TEST_VARIANT", "standard")

settings.register_profile(
    "pyiterate",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("pyiterate")


@pytest.fixture(scope="session")
def resolver():
    return Resolver.for_variant(VARIANT)


@pytest.fixture(scope="session")
def resolve(resolver):
    return resolver.resolve


@pytest.fixture(scope="session")
def iterate(resolve):
    """Resolve a value and drain it, failing if it is not iterable."""

    def _iterate(value):
        iterator = resolve(value)
        assert iterator is not None, f"{inspect_value(value)} is not iterable"
        assert callable(getattr(iterator, "next", None)), (
            f"iterator does not have a next function, got {inspect_value(iterator)}"
        )
        return drain(iterator)

    return _iterate


@pytest.fixture(autouse=True)
def isolated_globals():
    """Reset process-wide singletons around every test."""
    set_resolver(None)
    set_environment(None)
    set_logger(PyIterateLogger(color=False))
    yield
    set_resolver(None)
    set_environment(None)
    set_logger(PyIterateLogger(color=False))
