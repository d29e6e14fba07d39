"""Tests for the process entry point."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hubinvest_grpc import main
from hubinvest_grpc.auth import LocalTokenValidator, UserServiceTokenValidator
from hubinvest_grpc.config import ServiceConfig
from hubinvest_grpc.errors import ContainerLoadError


def _config(**overrides) -> ServiceConfig:
    values = dict(
        service_name="hubinvest-grpc",
        container_factory="fake_containers:build",
        grpc_port=50051,
        metrics_port=0,
        shutdown_grace_seconds=1.5,
    )
    values.update(overrides)
    return ServiceConfig(_env_file=None, **values)


class TestCreateTokenValidator:
    def test_user_service(self) -> None:
        validator, user_client = main.create_token_validator(
            _config(token_validator="user-service", user_service_host="users", user_service_port=7000)
        )

        assert isinstance(validator, UserServiceTokenValidator)
        assert user_client.address == "users:7000"

    def test_local_with_secret(self) -> None:
        validator, user_client = main.create_token_validator(
            _config(jwt_secret_key="test-secret-key-for-jwt-testing-min-32-bytes")
        )

        assert isinstance(validator, LocalTokenValidator)
        assert user_client is None

    def test_local_without_secret_uses_container(self) -> None:
        assert main.create_token_validator(_config(jwt_secret_key="")) == (None, None)


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_loggers(self):
        yield
        for name in ("hubinvest_grpc", "shared"):
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
            logger.propagate = True

    def test_package_loggers_get_json_handler(self) -> None:
        main.configure_logging(_config(log_level="DEBUG"))

        for name in ("hubinvest_grpc", "shared"):
            logger = logging.getLogger(name)
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert logger.handlers[0].formatter.service_name == "hubinvest-grpc"


class TestServe:
    @pytest.mark.asyncio
    async def test_cancellation_stops_server_then_user_client(self) -> None:
        grpc_server = MagicMock()
        grpc_server.serve = AsyncMock(side_effect=asyncio.CancelledError())
        grpc_server.stop = AsyncMock()
        user_client = AsyncMock()
        validator = MagicMock()
        container = MagicMock()

        with patch.object(main, "load_container", return_value=container) as load, patch.object(
            main, "create_token_validator", return_value=(validator, user_client)
        ), patch.object(main, "create_server", return_value=grpc_server) as create, patch.object(
            main, "configure_logging"
        ):
            await main.serve(_config())

        load.assert_called_once_with("fake_containers:build")
        create.assert_called_once_with(container, 50051, token_validator=validator)
        grpc_server.stop.assert_awaited_once_with(grace=1.5)
        user_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_metrics_server_started_when_port_set(self) -> None:
        grpc_server = MagicMock()
        grpc_server.serve = AsyncMock()

        with patch.object(main, "load_container"), patch.object(
            main, "create_server", return_value=grpc_server
        ), patch.object(main, "start_metrics_server") as start_metrics, patch.object(
            main, "configure_logging"
        ):
            await main.serve(_config(metrics_port=9100))

        start_metrics.assert_called_once_with(9100)

    @pytest.mark.asyncio
    async def test_missing_container_factory(self) -> None:
        with patch.object(main, "configure_logging"):
            with pytest.raises(ContainerLoadError):
                await main.serve(_config(container_factory=""))
