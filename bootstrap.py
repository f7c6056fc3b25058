"""
Bootstrap module for the EasyBusy MCP gateway.
Wires config, upstream client and tool dispatcher into one container.
"""

from dataclasses import dataclass

from dotenv import load_dotenv

from src.adapters.easybusy import EasyBusyClient
from src.config import GatewayConfig
from src.tools.dispatcher import ToolDispatcher


@dataclass(frozen=True)
class AppContainer:
    config: GatewayConfig
    client: EasyBusyClient
    dispatcher: ToolDispatcher


def bootstrap(config: GatewayConfig) -> AppContainer:
    """Build the components for one gateway process."""
    client = EasyBusyClient(config)
    return AppContainer(config=config, client=client, dispatcher=ToolDispatcher(client))


def load_config() -> GatewayConfig:
    """Read configuration from the environment, loading ``.env`` first."""
    load_dotenv()
    return GatewayConfig.from_env()
