from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# Generated examples share the autouse environment fixture
settings.register_profile(
    "groot",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("groot")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)
