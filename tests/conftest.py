"""Pytest configuration for the localeid test suite.

Hypothesis profile is chosen from HYPOTHESIS_PROFILE, then CI=true ("ci"),
else "dev". Tests marked @pytest.mark.fuzz only run with `pytest -m fuzz`
or when tests/test_locale_fuzzing.py is named on the command line.
"""

import os

import pytest
from hypothesis import Verbosity, settings

_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in _PROFILES:
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "fuzz: robustness tests on arbitrary input (run with -m fuzz)"
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless they were asked for."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    if any("test_locale_fuzzing" in str(arg) for arg in config.invocation_params.args):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
