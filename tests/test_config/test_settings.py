"""Testes dos settings carregados do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    AzureOpenAISettings,
    BaseSettings,
    FirestoreSettings,
    get_azure_openai_settings,
    get_base_settings,
    get_firestore_settings,
)
from config.settings.ai.azure_openai import DEFAULT_DEPLOYMENT


class TestBaseSettings:
    def test_development_defaults_to_memory_backend(self) -> None:
        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.document_store_backend == "memory"
        assert settings.validate() == []

    @pytest.mark.parametrize(("raw", "expected"), [("prod", "production"), ("stage", "staging")])
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        settings = get_base_settings()

        assert settings.environment == expected
        assert settings.document_store_backend == "firestore"

    def test_explicit_backend_overrides_environment_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DOCUMENT_STORE_BACKEND", "MEMORY")

        assert get_base_settings().document_store_backend == "memory"

    def test_invalid_backend_is_reported(self) -> None:
        settings = BaseSettings(document_store_backend="redis")  # type: ignore[arg-type]

        assert any("DOCUMENT_STORE_BACKEND" in error for error in settings.validate())


class TestAzureOpenAISettings:
    def test_missing_endpoint_and_key_are_reported(self) -> None:
        errors = get_azure_openai_settings().validate()

        assert any("AZURE_OPENAI_ENDPOINT" in error for error in errors)
        assert any("AZURE_OPENAI_KEY_PRIMARY" in error for error in errors)

    def test_legacy_key_variable_is_primary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://example.openai.azure.com")
        monkeypatch.setenv("AZURE_OPENAI_KEY", "legacy-key")

        settings = get_azure_openai_settings()

        assert settings.key_primary == "legacy-key"
        assert settings.default_deployment == DEFAULT_DEPLOYMENT
        assert settings.validate() == []

    def test_empty_deployment_env_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT", "")

        assert get_azure_openai_settings().default_deployment == DEFAULT_DEPLOYMENT

    def test_invalid_timeout(self) -> None:
        settings = AzureOpenAISettings(endpoint="e", key_primary="k", timeout_seconds=0)

        assert settings.validate() == ["AZURE_OPENAI_TIMEOUT_SECONDS deve ser > 0"]


class TestFirestoreSettings:
    def test_project_required(self) -> None:
        assert FirestoreSettings().validate("") != []
        assert FirestoreSettings().validate("my-project") == []

    def test_collections_default(self) -> None:
        settings = get_firestore_settings()

        assert settings.collection_sessions == "sessions"
        assert settings.collection_configurations == "configurations"
        assert settings.collection_plan_history == "plan_history"
        assert settings.config_document_id == "discovery_config"
