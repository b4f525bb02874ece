from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)


@pytest.fixture(autouse=True)
def reset_collaborators():
    """Fixture to put every collaborator registry back to its default after each test"""
    yield

    from notifications.channel import reset_notifier
    from ordering.repository import reset_order_repository
    from payments.gateway import reset_gateway
    from shared.config import reset_settings

    reset_gateway()
    reset_order_repository()
    reset_notifier()
    reset_settings()
