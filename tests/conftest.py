"""Shared pytest setup: Hypothesis profiles and the fuzz marker gate.

Profiles:
- dev (default): 500 examples
- ci: 50 derandomized examples, selected when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE=<name> selects a profile explicitly. Tests marked
@pytest.mark.fuzz are skipped unless the run selects them with -m fuzz.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

_PROFILES = ("dev", "ci", "verbose")

# Babel loads CLDR data lazily; the first example per locale is slow.
_SUPPRESSED = [HealthCheck.too_slow]
_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    deadline=None,
    suppress_health_check=_SUPPRESSED,
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    deadline=None,
    suppress_health_check=_SUPPRESSED,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    deadline=None,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE wins, then CI=true, then dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit is not None and explicit in _PROFILES:
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression names them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
