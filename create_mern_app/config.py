"""create-mern-app configuration.

Typed settings for a generation run. Everything the generated project bakes
into its ``.env`` files, manifests and compose file (ports, database name,
JWT placeholder, application name) lives here so it can be supplied
explicitly instead of being looked up from the environment mid-run.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator


class PortConfig(BaseModel):
    """Ports used by the generated project's services."""

    client: int = Field(default=3000, ge=1, le=65535)
    server: int = Field(default=5000, ge=1, le=65535)
    mongodb: int = Field(default=27017, ge=1, le=65535)

    def as_dict(self) -> dict[str, int]:
        """Return a plain ``{service: port}`` mapping."""
        return {
            "client": self.client,
            "server": self.server,
            "mongodb": self.mongodb,
        }

    def all_ports(self) -> list[int]:
        """Return every allocated port as a flat list."""
        return list(self.as_dict().values())

    @model_validator(mode="after")
    def _check_distinct(self) -> "PortConfig":
        ports = self.all_ports()
        if len(set(ports)) != len(ports):
            raise ValueError(f"client, server and mongodb ports must differ, got {self.as_dict()}")
        return self


class Config(BaseModel):
    """Global create-mern-app configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to every ``ProjectConfig`` built for the run.
    """

    output_dir: Path = Field(default_factory=Path.cwd)
    ports: PortConfig = Field(default_factory=PortConfig)
    database_name: str = Field(default="mernapp", min_length=1)
    app_name: str = Field(default="MERN App")
    jwt_secret: str = Field(default="your-super-secret-jwt-key-change-this-in-production")

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def mongodb_uri(self) -> str:
        """Connection string for a local MongoDB instance."""
        return f"mongodb://localhost:{self.ports.mongodb}/{self.database_name}"

    @property
    def api_url(self) -> str:
        """Base URL the client uses to reach the API."""
        return f"http://localhost:{self.ports.server}/api"

    @property
    def client_url(self) -> str:
        """URL of the client dev server."""
        return f"http://localhost:{self.ports.client}"

    def project_path(self, name: str) -> Path:
        """Absolute root directory for a project called *name*.

        The name is joined verbatim; it is not checked for characters the
        filesystem would reject.
        """
        return (self.output_dir / name).absolute()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MERN_OUTPUT_DIR, MERN_CLIENT_PORT, MERN_SERVER_PORT,
            MERN_MONGODB_PORT, MERN_DATABASE_NAME, MERN_APP_NAME,
            MERN_JWT_SECRET.
        """
        port_kwargs: dict[str, Any] = {}
        if os.environ.get("MERN_CLIENT_PORT"):
            port_kwargs["client"] = int(os.environ["MERN_CLIENT_PORT"])
        if os.environ.get("MERN_SERVER_PORT"):
            port_kwargs["server"] = int(os.environ["MERN_SERVER_PORT"])
        if os.environ.get("MERN_MONGODB_PORT"):
            port_kwargs["mongodb"] = int(os.environ["MERN_MONGODB_PORT"])

        kwargs: dict[str, Any] = {"ports": PortConfig(**port_kwargs)}
        if os.environ.get("MERN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["MERN_OUTPUT_DIR"])
        if os.environ.get("MERN_DATABASE_NAME"):
            kwargs["database_name"] = os.environ["MERN_DATABASE_NAME"]
        if os.environ.get("MERN_APP_NAME"):
            kwargs["app_name"] = os.environ["MERN_APP_NAME"]
        if os.environ.get("MERN_JWT_SECRET"):
            kwargs["jwt_secret"] = os.environ["MERN_JWT_SECRET"]

        return cls(**kwargs)
