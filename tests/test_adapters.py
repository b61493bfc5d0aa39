"""OpenAI and netmiko adapters with their third-party clients mocked out."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from netmiko.exceptions import NetmikoAuthenticationException, ReadTimeout
from openai import OpenAIError
from paramiko import SSHException

from tac_assistant.llm.adapters.openai_adapter import OpenAIAdapter
from tac_assistant.services.exceptions import (
    BackendError,
    CommandExecutionError,
    DeviceConnectionError,
)
from tac_assistant.transport.adapters.netmiko_adapter import NetmikoTransport

CONNECT_HANDLER = "tac_assistant.transport.adapters.netmiko_adapter.ConnectHandler"


def completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def adapter():
    adapter = OpenAIAdapter(api_key="test-key", model_name="gpt-4o")
    adapter.client = MagicMock()
    return adapter


# === OpenAI ===


@pytest.mark.asyncio
async def test_openai_returns_first_choice_text(adapter):
    adapter.client.chat.completions.create = AsyncMock(
        return_value=completion("show clock", "ignored")
    )
    messages = [{"role": "user", "content": "{}"}]

    text = await adapter.generate_text(messages, temperature=0.0)

    assert text == "show clock"
    adapter.client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o", messages=messages, temperature=0.0
    )


@pytest.mark.asyncio
async def test_openai_error_becomes_backend_error(adapter):
    adapter.client.chat.completions.create = AsyncMock(side_effect=OpenAIError("boom"))

    with pytest.raises(BackendError, match="boom"):
        await adapter.generate_text([])


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [completion(), completion(None)])
async def test_openai_malformed_response_is_backend_error(adapter, response):
    adapter.client.chat.completions.create = AsyncMock(return_value=response)

    with pytest.raises(BackendError):
        await adapter.generate_text([])


# === Netmiko ===


def test_netmiko_open_disables_host_key_checking(connection_config):
    with patch(CONNECT_HANDLER) as handler:
        NetmikoTransport(connection_config, device_type="cisco_xr").open()

    handler.assert_called_once_with(
        device_type="cisco_xr",
        host="172.20.20.3",
        username="clab",
        password="clab@123",
        ssh_strict=False,
        system_host_keys=False,
    )


def test_netmiko_open_failure_is_connection_error(connection_config):
    with patch(CONNECT_HANDLER, side_effect=NetmikoAuthenticationException("bad password")):
        transport = NetmikoTransport(connection_config)
        with pytest.raises(DeviceConnectionError, match="172.20.20.3"):
            transport.open()

    # close() after a failed open is a no-op
    transport.close()


def test_netmiko_key_exchange_failure_is_connection_error(connection_config):
    error = SSHException("Incompatible ssh peer (no acceptable kex algorithm)")
    with patch(CONNECT_HANDLER, side_effect=error):
        transport = NetmikoTransport(connection_config)
        with pytest.raises(DeviceConnectionError, match="no acceptable kex"):
            transport.open()


def test_netmiko_ssh_error_while_sending_is_execution_error(connection_config):
    with patch(CONNECT_HANDLER) as handler:
        conn = handler.return_value
        conn.send_command.side_effect = SSHException("SSH session not active")

        with pytest.raises(CommandExecutionError, match="show clock"):
            with NetmikoTransport(connection_config) as transport:
                transport.send_commands(["show clock"])

    conn.disconnect.assert_called_once()


def test_netmiko_sends_every_command_in_order(connection_config):
    with patch(CONNECT_HANDLER) as handler:
        conn = handler.return_value
        conn.send_command.side_effect = lambda c: f"out:{c}"

        with NetmikoTransport(connection_config) as transport:
            results = transport.send_commands(["show version", "", "show clock"])

    assert [r.command for r in results] == ["show version", "", "show clock"]
    assert [r.result for r in results] == ["out:show version", "out:", "out:show clock"]
    conn.disconnect.assert_called_once()


def test_netmiko_send_failure_is_execution_error_and_closes(connection_config):
    with patch(CONNECT_HANDLER) as handler:
        conn = handler.return_value
        conn.send_command.side_effect = ReadTimeout("pattern not detected")

        with pytest.raises(CommandExecutionError, match="show version"):
            with NetmikoTransport(connection_config) as transport:
                transport.send_commands(["show version"])

    conn.disconnect.assert_called_once()


def test_netmiko_send_before_open_fails(connection_config):
    with pytest.raises(CommandExecutionError):
        NetmikoTransport(connection_config).send_commands(["show clock"])


def test_netmiko_close_is_idempotent(connection_config):
    with patch(CONNECT_HANDLER) as handler:
        transport = NetmikoTransport(connection_config)
        transport.open()
        transport.close()
        transport.close()

    handler.return_value.disconnect.assert_called_once()
