"""
Configuration settings for the fixture seeder.

Uses Pydantic Settings to load environment variables for the MongoDB connection
and logging. Only the connection is configurable; the target database and
collection are fixed in `fixture_seeder.seeder`.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple
from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixture_seeder.utils.logging import get_logger

log = get_logger(__name__)


class Settings(BaseSettings):
    # MongoDB
    mongo_url: str = Field("mongodb://localhost:27017", alias="MONGO_URL")
    mongo_username: Optional[str] = Field(None, alias="MONGO_USERNAME")
    mongo_password: Optional[str] = Field(None, alias="MONGO_PASSWORD")
    mongo_auth_source: str = Field("admin", alias="MONGO_AUTH_SOURCE")
    mongo_ssl_enabled: bool = Field(False, alias="MONGO_SSL_ENABLED")
    mongo_timeout_seconds: int = Field(10, alias="MONGO_TIMEOUT", gt=0)

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def mongo_timeout_ms(self) -> int:
        return self.mongo_timeout_seconds * 1000

    def connection_string(self) -> str:
        """
        Compose the MongoDB URI from `mongo_url` plus the optional settings.

        Options already present in `mongo_url` always win and are passed through
        unchanged, repeated keys included; new options are appended only for
        keys the URL does not set. Credentials are only injected when the URL
        carries none, and `MONGO_PASSWORD` is ignored (with a warning) unless
        `MONGO_USERNAME` is set too.
        """
        parts = urlsplit(self.mongo_url)
        netloc = parts.netloc

        if self.mongo_password is not None and not self.mongo_username:
            log.warning("MONGO_PASSWORD is set without MONGO_USERNAME; ignoring it")

        if self.mongo_username and "@" not in netloc:
            userinfo = quote_plus(self.mongo_username)
            if self.mongo_password is not None:
                userinfo = f"{userinfo}:{quote_plus(self.mongo_password)}"
            netloc = f"{userinfo}@{netloc}"

        pairs = parse_qsl(parts.query, keep_blank_values=True)
        present = {key for key, _ in pairs}
        extra: List[Tuple[str, str]] = []

        def add_option(key: str, value: str) -> None:
            if key not in present:
                present.add(key)
                extra.append((key, value))

        hosts = netloc.rpartition("@")[2]

        if parts.scheme == "mongodb" and "," not in hosts and hosts.startswith("localhost"):
            add_option("directConnection", "true")
        if self.mongo_username and self.mongo_auth_source:
            add_option("authSource", self.mongo_auth_source)
        if self.mongo_ssl_enabled and "ssl" not in present:
            add_option("tls", "true")

        # mongodb://host needs a "/" before the query string
        query = "&".join(filter(None, [parts.query, urlencode(extra)]))
        path = parts.path or ("/" if query else "")
        return urlunsplit((parts.scheme, netloc, path, query, parts.fragment))

    def redacted_connection_string(self) -> str:
        """Connection string with any password replaced by `***`."""
        uri = self.connection_string()
        parts = urlsplit(uri)
        userinfo, sep, hosts = parts.netloc.rpartition("@")
        if not sep or ":" not in userinfo:
            return uri
        user = userinfo.split(":", 1)[0]
        return urlunsplit(
            (parts.scheme, f"{user}:***@{hosts}", parts.path, parts.query, parts.fragment)
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
