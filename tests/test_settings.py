"""
tests.test_settings

Env-driven configuration and the opt-in logging setup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from state_reducers import AddAction, Settings, configure_logging, get_settings, list_reducer
from state_reducers.observability.logging import _add_service_name


@pytest.fixture
def restore_logging() -> Iterator[None]:
    package_logger = logging.getLogger("state_reducers")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
    structlog.reset_defaults()


def test_defaults() -> None:
    settings = get_settings()
    assert settings.env == "dev"
    assert settings.service_name == "state-reducers"
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATE_REDUCERS_SERVICE_NAME", "todo-store")
    monkeypatch.setenv("STATE_REDUCERS_ENV", "prod")
    get_settings.cache_clear()

    settings = get_settings()
    assert (settings.service_name, settings.env) == ("todo-store", "prod")


def test_list_key_does_not_depend_on_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATE_REDUCERS_LIST_KEY", "todos")
    get_settings.cache_clear()

    assert list_reducer({"list": []}, AddAction(payload=1)) == {"list": [1]}


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_renders_json_outside_dev() -> None:
    root_handlers = list(logging.getLogger().handlers)

    configure_logging(Settings(env="prod", log_level="debug"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert logging.getLogger("state_reducers").level == logging.DEBUG
    assert logging.getLogger().handlers == root_handlers


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging_renders_console_in_dev() -> None:
    configure_logging(Settings(env="dev"))

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_service_name_processor_does_not_override() -> None:
    processor = _add_service_name("svc")
    assert processor(None, "info", {}) == {"service": "svc"}
    assert processor(None, "info", {"service": "other"}) == {"service": "other"}
