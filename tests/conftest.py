from __future__ import annotations

from typing import Iterator

import pytest

from tmaker.config import settings as settings_mod


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()
