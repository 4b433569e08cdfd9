"""Configuração do pytest para o serviço de onboarding M&A."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ai.config.prompt_assets_loader import clear_prompt_assets_cache  # noqa: E402
from app.domain.session import Session  # noqa: E402
from app.infra.stores.memory_stores import (  # noqa: E402
    MemoryDiscoveryConfigStore,
    MemoryPlanSnapshotStore,
    MemorySessionStore,
)
from config.settings import (  # noqa: E402
    get_azure_openai_settings,
    get_base_settings,
    get_firestore_settings,
)

_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "DOCUMENT_STORE_BACKEND",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_KEY",
    "AZURE_OPENAI_KEY_PRIMARY",
    "AZURE_OPENAI_KEY_SECONDARY",
    "AZURE_OPENAI_DEPLOYMENT",
)


def _clear_settings_caches() -> None:
    get_base_settings.cache_clear()
    get_azure_openai_settings.cache_clear()
    get_firestore_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste parte de settings de desenvolvimento, sem credenciais."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_settings_caches()
    clear_prompt_assets_cache()
    yield
    _clear_settings_caches()


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def config_store() -> MemoryDiscoveryConfigStore:
    return MemoryDiscoveryConfigStore()


@pytest.fixture
def snapshot_store() -> MemoryPlanSnapshotStore:
    return MemoryPlanSnapshotStore()


@pytest_asyncio.fixture
async def stored_session(session_store: MemorySessionStore) -> Session:
    session = Session.new()
    await session_store.create(session)
    return session
