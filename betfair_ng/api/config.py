"""Client configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .error import ConfigurationError
from .validation import PARAMS_NOT_MAPPING

# Construction keys accepted by ClientConfig.from_dict, mapped to attributes
CONFIG_KEYS = {
    "certificatePath": "certificate_path",
    "keyPath": "key_path",
    "applicationKey": "application_key",
    "sessionToken": "session_token",
}

ENV_VARS = {
    "BETFAIR_CERT_PATH": "certificate_path",
    "BETFAIR_KEY_PATH": "key_path",
    "BETFAIR_APP_KEY": "application_key",
    "BETFAIR_SESSION_TOKEN": "session_token",
}


@dataclass
class ClientConfig:
    """Credentials and certificate paths for a client.

    Empty strings mean "not set". The session token is normally obtained by
    logging in, but a token acquired elsewhere can be supplied here.
    """

    certificate_path: str = ""
    key_path: str = ""
    application_key: str = ""
    session_token: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ClientConfig":
        """Create from a mapping using the camelCase construction keys.

        Raises:
            ConfigurationError: If data is not a mapping or has an unknown key
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(PARAMS_NOT_MAPPING)
        values = {}
        for key, value in data.items():
            if key not in CONFIG_KEYS:
                raise ConfigurationError(f"Unknown key value {key} in parameter hash")
            values[CONFIG_KEYS[key]] = value or ""
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping] = None) -> "ClientConfig":
        """Create from ``BETFAIR_*`` environment variables."""
        environ = os.environ if environ is None else environ
        return cls(**{attr: environ.get(var, "") for var, attr in ENV_VARS.items()})

    @classmethod
    def coerce(cls, config: Any) -> "ClientConfig":
        """Accept a ClientConfig, a construction mapping, or None."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls.from_dict(config)
