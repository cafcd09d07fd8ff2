from collections import defaultdict
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def locators():
    """selector -> MagicMock，同一个 selector 始终返回同一个 locator"""
    return defaultdict(MagicMock)


@pytest.fixture
def fake_page(locators):
    page = MagicMock()
    page.locator.side_effect = lambda selector: locators[selector]
    page.url = "https://www.saucedemo.com/inventory.html"
    return page
