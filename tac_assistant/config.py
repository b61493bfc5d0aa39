from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Security: Read from .env, never hardcode defaults here
    OPENAI_API_KEY: str

    # Model Configuration
    OPENAI_MODEL: str = "gpt-4o"

    # Generation Parameters
    LLM_TEMPERATURE: float = 0.0

    # Device Defaults (pre-populate the configuration screen, never bypass it)
    NETWORK_HOST: str = "172.20.20.3"
    NETWORK_USER: str = "clab"
    NETWORK_PASS: str = "clab@123"

    # Netmiko device_type used for every transport session
    DEVICE_PLATFORM: str = "cisco_xr"

    # Static device descriptor sent as 'metadata' on every backend call
    DEVICE_METADATA: str = '{"router_type": "Cisco XRv 9000", "Virtual": true}'

    # Batch variant: transcript carried over between invocations
    TRANSCRIPT_FILE: str = "output.txt"

    # Optional hard limit (seconds) for one whole iteration. Unset = no limit.
    ITERATION_TIMEOUT: Optional[float] = None

    # Rendering / Logging
    RENDER_WIDTH: int = 100
    LOG_FILE: str = "tac_assistant.log"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
