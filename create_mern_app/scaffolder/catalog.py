"""The fixed template catalog.

Two tables drive generation:

* ``TEMPLATES`` maps a file *kind* (``"client.app"``, ``"root.readme"``...)
  to a pure function of the ``ProjectConfig`` returning the file content.
* ``PHASES`` lists, per phase, the directories to pre-create and the
  ``FileEntry`` records saying which kind is written where, optionally gated
  on one option flag.

Neither table holds mutable state, so every template can be rendered and
tested on its own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from .manifests import (
    client_package_json,
    root_package_json,
    server_package_json,
    web_app_manifest,
)
from .models import GenerateOptions, ProjectConfig
from .templates import TemplateRenderer

TemplateFn = Callable[[ProjectConfig], str]


class UnknownTemplateError(Exception):
    """Raised when a file kind is not in the catalog."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown template kind: {kind!r}")


# ---------------------------------------------------------------------------
# Rendering context
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_renderer() -> TemplateRenderer:
    """Shared renderer over the bundled template directory."""
    return TemplateRenderer()


def build_context(project: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    options = project.options
    settings = project.settings
    return {
        "project_name": project.name,
        "description": project.description,
        "app_name": settings.app_name,
        "use_typescript": options.typescript,
        "use_redux": options.redux,
        "use_socketio": options.socketio,
        "use_docker": options.docker,
        "ext": options.component_ext,
        "js_ext": options.module_ext,
        "ports": settings.ports.as_dict(),
        "database_name": settings.database_name,
        "mongodb_uri": settings.mongodb_uri,
        "api_url": settings.api_url,
        "client_url": settings.client_url,
        "jwt_secret": settings.jwt_secret,
    }


def _jinja(template_path: str) -> TemplateFn:
    def render(project: ProjectConfig) -> str:
        return get_renderer().render(template_path, build_context(project))

    return render


# ---------------------------------------------------------------------------
# Kind -> content function
# ---------------------------------------------------------------------------

# Kinds rendered from a Jinja2 file, path relative to the template directory.
TEMPLATE_FILES: dict[str, str] = {
    # client
    "client.index_html": "client/public/index.html.j2",
    "client.robots_txt": "client/public/robots.txt.j2",
    "client.app": "client/src/App.j2",
    "client.index": "client/src/index.j2",
    "client.app_css": "client/src/App.css.j2",
    "client.button": "client/src/components/Button.j2",
    "client.button_css": "client/src/components/Button.css.j2",
    "client.page_home": "client/src/pages/Home.j2",
    "client.page_login": "client/src/pages/Login.j2",
    "client.page_register": "client/src/pages/Register.j2",
    "client.page_dashboard": "client/src/pages/Dashboard.j2",
    "client.page_profile": "client/src/pages/Profile.j2",
    "client.api_service": "client/src/services/api.j2",
    "client.auth_service": "client/src/services/authService.j2",
    "client.socket_service": "client/src/services/socket.j2",
    "client.helpers": "client/src/utils/helpers.j2",
    "client.auth_context": "client/src/context/AuthContext.j2",
    "client.store": "client/src/store/store.j2",
    "client.auth_slice": "client/src/store/authSlice.j2",
    "client.app_router": "client/src/router/AppRouter.j2",
    "client.protected_route": "client/src/router/ProtectedRoute.j2",
    "client.global_css": "client/src/styles/index.css.j2",
    "client.config": "client/src/config/config.j2",
    "client.vite_config": "client/vite.config.j2",
    "client.env_local": "client/env.local.j2",
    "client.env_example": "client/env.example.j2",
    "client.tsconfig": "client/tsconfig.json.j2",
    "client.dockerfile": "client/Dockerfile.j2",
    "client.dockerignore": "client/dockerignore.j2",
    # server
    "server.server": "server/src/server.j2",
    "server.app": "server/src/app.j2",
    "server.database": "server/src/config/database.j2",
    "server.auth_middleware": "server/src/middleware/auth.j2",
    "server.error_handler": "server/src/middleware/errorHandler.j2",
    "server.user_model": "server/src/models/User.j2",
    "server.post_model": "server/src/models/Post.j2",
    "server.auth_controller": "server/src/controllers/authController.j2",
    "server.user_controller": "server/src/controllers/userController.j2",
    "server.auth_routes": "server/src/routes/authRoutes.j2",
    "server.user_routes": "server/src/routes/userRoutes.j2",
    "server.routes_index": "server/src/routes/index.j2",
    "server.auth_validation": "server/src/validations/authValidation.j2",
    "server.helpers": "server/src/utils/helpers.j2",
    "server.socket": "server/src/socket/index.j2",
    "server.env": "server/env.j2",
    "server.env_example": "server/env.example.j2",
    "server.dockerfile": "server/Dockerfile.j2",
    "server.dockerignore": "server/dockerignore.j2",
    # shared
    "shared.app_constants": "shared/appConstants.j2",
    "shared.types": "shared/types.j2",
    # root
    "root.readme": "root/README.md.j2",
    "root.gitignore": "root/gitignore.j2",
    "root.docker_compose": "root/docker-compose.yml.j2",
}

# Kinds built in Python and serialised as JSON.
MANIFEST_BUILDERS: dict[str, TemplateFn] = {
    "client.web_manifest": web_app_manifest,
    "client.package_json": client_package_json,
    "server.package_json": server_package_json,
    "root.package_json": root_package_json,
}

TEMPLATES: dict[str, TemplateFn] = {
    **{kind: _jinja(path) for kind, path in TEMPLATE_FILES.items()},
    **MANIFEST_BUILDERS,
}


def select_template(kind: str, project: ProjectConfig) -> str:
    """Return the content of file *kind* for *project*.

    Pure: the same ``(kind, project)`` always yields the same string.

    Raises:
        UnknownTemplateError: If *kind* is not in the catalog.
    """
    try:
        template = TEMPLATES[kind]
    except KeyError:
        raise UnknownTemplateError(kind) from None
    return template(project)


# ---------------------------------------------------------------------------
# Phase plans
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileEntry:
    """One file of a phase.

    ``path`` is relative to the phase root and may contain ``{ext}`` (component
    extension) and ``{js_ext}`` (module extension).  ``when`` names the option
    flag that gates the file; ``None`` means it is always written.
    """

    path: str
    kind: str
    when: str | None = None

    def applies(self, options: GenerateOptions) -> bool:
        return self.when is None or bool(getattr(options, self.when))

    def resolve_path(self, options: GenerateOptions) -> str:
        return self.path.format(ext=options.component_ext, js_ext=options.module_ext)


@dataclass(frozen=True)
class Phase:
    """A top-level generation pass: a sub-directory, its directories and files."""

    name: str
    subdir: str
    directories: tuple[str, ...]
    files: tuple[FileEntry, ...]


CLIENT_PHASE = Phase(
    name="client",
    subdir="client",
    directories=(
        "public",
        "src/components/common/Button",
        "src/components/common/Modal",
        "src/components/common/Loader",
        "src/components/forms/LoginForm",
        "src/components/forms/RegisterForm",
        "src/components/layout/MainLayout",
        "src/components/layout/AuthLayout",
        "src/pages/Home",
        "src/pages/Login",
        "src/pages/Register",
        "src/pages/Dashboard",
        "src/pages/Profile",
        "src/hooks",
        "src/context",
        "src/utils",
        "src/services",
        "src/store/slices",
        "src/styles",
        "src/assets/images",
        "src/constants",
        "src/types",
        "src/validation",
        "src/config",
        "src/router",
    ),
    files=(
        FileEntry("public/index.html", "client.index_html"),
        FileEntry("public/manifest.json", "client.web_manifest"),
        FileEntry("public/robots.txt", "client.robots_txt"),
        FileEntry("src/App.{ext}", "client.app"),
        FileEntry("src/index.{ext}", "client.index"),
        FileEntry("src/App.css", "client.app_css"),
        FileEntry("src/components/common/Button/Button.{ext}", "client.button"),
        FileEntry("src/components/common/Button/Button.css", "client.button_css"),
        FileEntry("src/pages/Home/Home.{ext}", "client.page_home"),
        FileEntry("src/pages/Login/Login.{ext}", "client.page_login"),
        FileEntry("src/pages/Register/Register.{ext}", "client.page_register"),
        FileEntry("src/pages/Dashboard/Dashboard.{ext}", "client.page_dashboard"),
        FileEntry("src/pages/Profile/Profile.{ext}", "client.page_profile"),
        FileEntry("src/services/api.{js_ext}", "client.api_service"),
        FileEntry("src/services/authService.{js_ext}", "client.auth_service"),
        FileEntry("src/utils/helpers.{js_ext}", "client.helpers"),
        FileEntry("src/context/AuthContext.{ext}", "client.auth_context"),
        FileEntry("src/store/store.{js_ext}", "client.store", when="redux"),
        FileEntry("src/store/slices/authSlice.{js_ext}", "client.auth_slice", when="redux"),
        FileEntry("src/services/socket.{js_ext}", "client.socket_service", when="socketio"),
        FileEntry("src/router/AppRouter.{ext}", "client.app_router"),
        FileEntry("src/router/ProtectedRoute.{ext}", "client.protected_route"),
        FileEntry("src/styles/index.css", "client.global_css"),
        FileEntry("src/config/config.{js_ext}", "client.config"),
        FileEntry("vite.config.{js_ext}", "client.vite_config"),
        FileEntry("package.json", "client.package_json"),
        FileEntry(".env.local", "client.env_local"),
        FileEntry(".env.example", "client.env_example"),
        FileEntry("tsconfig.json", "client.tsconfig", when="typescript"),
        FileEntry("Dockerfile", "client.dockerfile", when="docker"),
        FileEntry(".dockerignore", "client.dockerignore", when="docker"),
    ),
)

SERVER_PHASE = Phase(
    name="server",
    subdir="server",
    directories=(
        "src/controllers",
        "src/routes",
        "src/models",
        "src/middleware",
        "src/config",
        "src/utils",
        "src/validations",
        "src/services",
        "src/constants",
        "src/uploads/images",
        "src/tests/unit",
        "src/tests/integration",
    ),
    files=(
        FileEntry("src/server.js", "server.server"),
        FileEntry("src/app.js", "server.app"),
        FileEntry("src/config/database.js", "server.database"),
        FileEntry("src/middleware/auth.js", "server.auth_middleware"),
        FileEntry("src/middleware/errorHandler.js", "server.error_handler"),
        FileEntry("src/models/User.js", "server.user_model"),
        FileEntry("src/models/Post.js", "server.post_model"),
        FileEntry("src/controllers/authController.js", "server.auth_controller"),
        FileEntry("src/controllers/userController.js", "server.user_controller"),
        FileEntry("src/routes/authRoutes.js", "server.auth_routes"),
        FileEntry("src/routes/userRoutes.js", "server.user_routes"),
        FileEntry("src/routes/index.js", "server.routes_index"),
        FileEntry("src/validations/authValidation.js", "server.auth_validation"),
        FileEntry("src/utils/helpers.js", "server.helpers"),
        FileEntry("src/socket/index.js", "server.socket", when="socketio"),
        FileEntry("package.json", "server.package_json"),
        FileEntry(".env", "server.env"),
        FileEntry(".env.example", "server.env_example"),
        FileEntry("Dockerfile", "server.dockerfile", when="docker"),
        FileEntry(".dockerignore", "server.dockerignore", when="docker"),
    ),
)

SHARED_PHASE = Phase(
    name="shared",
    subdir="shared",
    directories=(
        "constants",
        "utils",
        "types",
    ),
    files=(
        FileEntry("constants/appConstants.js", "shared.app_constants"),
        FileEntry("types/index.ts", "shared.types", when="typescript"),
    ),
)

ROOT_PHASE = Phase(
    name="root",
    subdir="",
    directories=(),
    files=(
        FileEntry("README.md", "root.readme"),
        FileEntry(".gitignore", "root.gitignore"),
        FileEntry("package.json", "root.package_json"),
        FileEntry("docker-compose.yml", "root.docker_compose", when="docker"),
    ),
)

# Run in this order.
PHASES: tuple[Phase, ...] = (CLIENT_PHASE, SERVER_PHASE, SHARED_PHASE, ROOT_PHASE)
