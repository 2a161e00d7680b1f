"""Tests for environment-driven settings."""
from __future__ import annotations

import logging

import pytest

from distance_api.config import DEFAULT_DESTINATION, Settings, load_settings

_ENV_VARS = (
    "GOOGLE_API",
    "DESTINATION_ADDRESS",
    "ENVIRONMENT",
    "VERCEL_ENV",
    "CORS_ORIGINS",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.google_api_key == ""
    assert settings.maps_configured is False
    assert settings.destination == DEFAULT_DESTINATION == "B31 2UQ"
    assert settings.environment == "development"
    assert settings.cors_origins == ("http://localhost:3000",)
    assert settings.rate_limit_requests == 60


def test_reads_google_api_and_destination(monkeypatch):
    monkeypatch.setenv("GOOGLE_API", "AIzaFromEnv")
    monkeypatch.setenv("DESTINATION_ADDRESS", "SW1A 1AA")

    settings = load_settings()

    assert settings.google_api_key == "AIzaFromEnv"
    assert settings.maps_configured is True
    assert settings.destination == "SW1A 1AA"


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert load_settings().cors_origins == ("https://a.example", "https://b.example")


def test_cors_warns_in_production_without_origins(monkeypatch, caplog):
    monkeypatch.setenv("VERCEL_ENV", "production")
    caplog.set_level(logging.WARNING, logger="distance_api.config")

    settings = load_settings()

    assert settings.is_production is True
    assert settings.cors_origins == ()
    assert "CORS_ORIGINS" in caplog.text


def test_settings_are_immutable():
    settings = Settings(google_api_key="AIzaKey")
    with pytest.raises(Exception):
        settings.destination = "elsewhere"
