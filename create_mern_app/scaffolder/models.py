"""Pydantic models describing a generation run.

These are the immutable inputs handed to the template catalog and the
``ProjectGenerator``: the option record built from CLI flags and the project
identity that wraps it together with the run configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config import Config


class GenerateOptions(BaseModel):
    """Feature flags controlling which optional files and variants are emitted."""

    model_config = ConfigDict(frozen=True)

    typescript: bool = Field(default=False, description="Emit .tsx/.ts sources and tsconfig.json")
    redux: bool = Field(default=False, description="Add a Redux Toolkit store")
    socketio: bool = Field(default=False, description="Add Socket.IO on client and server")
    docker: bool = Field(default=False, description="Add Dockerfiles and docker-compose.yml")

    @property
    def component_ext(self) -> str:
        """Extension for component files (``tsx`` or ``jsx``)."""
        return "tsx" if self.typescript else "jsx"

    @property
    def module_ext(self) -> str:
        """Extension for plain module files (``ts`` or ``js``)."""
        return "ts" if self.typescript else "js"

    def enabled(self) -> list[str]:
        """Names of the flags that are switched on, in declaration order."""
        return [name for name in type(self).model_fields if getattr(self, name)]


class ProjectConfig(BaseModel):
    """The project to scaffold: its name, options and run settings."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Directory name and manifest name, used verbatim")
    description: str = Field(default="MERN Stack Application")
    options: GenerateOptions = Field(default_factory=GenerateOptions)
    settings: Config = Field(default_factory=Config)

    @property
    def root(self) -> Path:
        """Absolute path of the project directory."""
        return self.settings.project_path(self.name)
