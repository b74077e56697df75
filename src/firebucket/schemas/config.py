import os
from pathlib import Path

import pulumi
from pydantic import BaseModel, Field, field_validator

from ..core import CONFIG_CREDENTIALS_KEY, CONFIG_NAMESPACE, CREDENTIALS_ENV_VAR
from ..logger import logger


class ProviderConfig(BaseModel):
    """
    Provider-level configuration. `credentials` is raw JSON key material;
    None means Application Default Credentials are used.
    """

    credentials: str | None = Field(default=None, repr=False)

    @field_validator("credentials")
    @classmethod
    def _read_key_file(cls, v: str | None) -> str | None:
        if not v or not v.strip():
            return None
        # Accept a path to a key file as well as the JSON itself
        if not v.lstrip().startswith("{"):
            path = Path(v).expanduser()
            if path.is_file():
                return path.read_text()
        return v

    @classmethod
    def load(cls) -> "ProviderConfig":
        """
        Resolves credentials from Pulumi stack config (firebase:credentials),
        then FIREBASE_CREDENTIALS, then falls back to ADC.
        """
        creds = _pulumi_config_credentials()
        if creds:
            logger.debug(f"Using credentials from {CONFIG_NAMESPACE}:credentials")
            return cls(credentials=creds)

        creds = os.environ.get(CREDENTIALS_ENV_VAR)
        if creds:
            logger.debug(f"Using credentials from ${CREDENTIALS_ENV_VAR}")
            return cls(credentials=creds)

        logger.debug("No explicit credentials, using Application Default Credentials")
        return cls()


def _pulumi_config_credentials() -> str | None:
    # Reads the stack config the engine exports to the program; empty outside one
    return pulumi.Config(CONFIG_NAMESPACE).get(CONFIG_CREDENTIALS_KEY)
