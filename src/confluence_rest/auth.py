"""Credential handling for Confluence HTTP Basic authentication.

The Confluence REST API authenticates every request with an HTTP Basic
``Authorization`` header built from a username and password pair. This module
encodes that header and optionally loads connection settings from environment
variables using python-dotenv.
"""

import base64
import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "admin"


class Credentials(NamedTuple):
    """Confluence username and password."""
    username: str
    password: str

    def authorization_header(self) -> str:
        return basic_auth_header(self.username, self.password)


def basic_auth_header(username: str, password: str) -> str:
    """Return the Basic ``Authorization`` header value for a credential pair.

    Example:
        >>> basic_auth_header("admin", "admin")
        'Basic YWRtaW46YWRtaW4='
    """
    raw = f"{username}:{password}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class EnvironmentSettings(NamedTuple):
    """Connection settings read from the environment; unset values are None."""
    url: Optional[str]
    username: Optional[str]
    password: Optional[str]
    timeout: Optional[float]


class Authenticator:
    """Loads optional Confluence settings from environment variables.

    Values are read from the process environment after loading a .env file
    with python-dotenv. Nothing is required: any missing value is left as
    None so that the client defaults apply.

    Environment variables:
        CONFLUENCE_URL: Base URL of the Confluence instance
        CONFLUENCE_USER: Username
        CONFLUENCE_PASSWORD: Password
        CONFLUENCE_TIMEOUT: Request timeout in seconds

    Example:
        >>> settings = Authenticator().get_settings()
        >>> settings.url
        'http://confluence.example.org'
    """

    def __init__(self):
        load_dotenv()

    def get_settings(self) -> EnvironmentSettings:
        """Read settings from the environment.

        Raises:
            ConfigurationError: If CONFLUENCE_TIMEOUT is not a positive number
        """
        raw_timeout = os.getenv('CONFLUENCE_TIMEOUT')
        timeout = None
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"CONFLUENCE_TIMEOUT must be a number, got '{raw_timeout}'",
                    setting='CONFLUENCE_TIMEOUT',
                )
            if timeout <= 0:
                raise ConfigurationError(
                    f"CONFLUENCE_TIMEOUT must be positive, got '{raw_timeout}'",
                    setting='CONFLUENCE_TIMEOUT',
                )

        return EnvironmentSettings(
            url=os.getenv('CONFLUENCE_URL') or None,
            username=os.getenv('CONFLUENCE_USER') or None,
            password=os.getenv('CONFLUENCE_PASSWORD') or None,
            timeout=timeout,
        )
