"""JSON manifest builders.

``package.json`` files and the PWA ``manifest.json`` are assembled as Python
dicts and serialised with ``json.dumps`` instead of being templated, so the
output is always valid JSON whatever the options are.  Key order is fixed by
construction, which keeps the output byte-identical across runs.
"""

from __future__ import annotations

import json
from typing import Any

from .models import ProjectConfig

MANIFEST_VERSION = "1.0.0"

CLIENT_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-router-dom": "^6.8.0",
}
CLIENT_DEV_DEPENDENCIES: dict[str, str] = {
    "vite": "^4.4.0",
    "@vitejs/plugin-react": "^4.0.0",
}
REDUX_DEPENDENCIES: dict[str, str] = {
    "redux": "^4.2.1",
    "react-redux": "^8.0.5",
    "@reduxjs/toolkit": "^1.9.2",
}
TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.0.0",
    "@types/react": "^18.2.0",
    "@types/react-dom": "^18.2.0",
}
SOCKETIO_CLIENT_DEPENDENCIES: dict[str, str] = {
    "socket.io-client": "^4.7.2",
}

SERVER_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "express-validator": "^7.0.1",
    "mongoose": "^7.6.0",
    "bcryptjs": "^2.4.3",
    "jsonwebtoken": "^9.0.0",
    "cors": "^2.8.5",
    "helmet": "^6.0.1",
    "morgan": "^1.10.0",
    "dotenv": "^16.0.3",
}
SERVER_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^2.0.20",
}
SOCKETIO_SERVER_DEPENDENCIES: dict[str, str] = {
    "socket.io": "^4.7.2",
}


def dump_json(data: dict[str, Any]) -> str:
    """Serialise *data* the way every generated JSON file is laid out."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def root_package_json(project: ProjectConfig) -> str:
    """Workspace-level manifest; its ``name`` is the project name verbatim."""
    return dump_json({
        "name": project.name,
        "version": MANIFEST_VERSION,
        "description": project.description,
        "scripts": {
            "dev:client": "cd client && npm run dev",
            "dev:server": "cd server && npm run dev",
            "build:client": "cd client && npm run build",
            "start:server": "cd server && npm start",
            "dev": 'concurrently "npm run dev:server" "npm run dev:client"',
            "install:all": "npm install && cd client && npm install && cd ../server && npm install",
        },
        "devDependencies": {
            "concurrently": "^7.6.0",
        },
    })


def client_package_json(project: ProjectConfig) -> str:
    """Client manifest.

    Redux, Socket.IO and TypeScript packages are merged in only when the
    matching option is set.
    """
    options = project.options

    dependencies = dict(CLIENT_DEPENDENCIES)
    if options.redux:
        dependencies.update(REDUX_DEPENDENCIES)
    if options.socketio:
        dependencies.update(SOCKETIO_CLIENT_DEPENDENCIES)

    dev_dependencies = dict(CLIENT_DEV_DEPENDENCIES)
    if options.typescript:
        dev_dependencies.update(TYPESCRIPT_DEV_DEPENDENCIES)

    return dump_json({
        "name": "mern-client",
        "version": MANIFEST_VERSION,
        "private": True,
        "type": "module",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        },
        "dependencies": dependencies,
        "devDependencies": dev_dependencies,
    })


def server_package_json(project: ProjectConfig) -> str:
    """Server manifest; adds ``socket.io`` when the option is set."""
    dependencies = dict(SERVER_DEPENDENCIES)
    if project.options.socketio:
        dependencies.update(SOCKETIO_SERVER_DEPENDENCIES)

    return dump_json({
        "name": "mern-server",
        "version": MANIFEST_VERSION,
        "private": True,
        "type": "commonjs",
        "main": "src/server.js",
        "scripts": {
            "dev": "nodemon src/server.js",
            "start": "node src/server.js",
        },
        "dependencies": dependencies,
        "devDependencies": dict(SERVER_DEV_DEPENDENCIES),
    })


def web_app_manifest(project: ProjectConfig) -> str:
    """``public/manifest.json`` for the client."""
    return dump_json({
        "short_name": project.settings.app_name,
        "name": project.description,
        "icons": [
            {
                "src": "favicon.ico",
                "sizes": "64x64 32x32 24x24 16x16",
                "type": "image/x-icon",
            },
        ],
        "start_url": ".",
        "display": "standalone",
        "theme_color": "#000000",
        "background_color": "#ffffff",
    })
