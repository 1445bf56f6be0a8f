"""Unit tests for Config and PortConfig (create_mern_app.config).

Tests cover:
- PortConfig defaults, as_dict, all_ports, validation
- Config defaults and derived values
- Config.project_path
- Config.from_env
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_mern_app.config import Config, PortConfig


# ---------------------------------------------------------------------------
# PortConfig
# ---------------------------------------------------------------------------


class TestPortConfig:
    @pytest.mark.unit
    def test_default_ports(self):
        ports = PortConfig()
        assert ports.client == 3000
        assert ports.server == 5000
        assert ports.mongodb == 27017

    @pytest.mark.unit
    def test_as_dict(self):
        assert PortConfig().as_dict() == {"client": 3000, "server": 5000, "mongodb": 27017}

    @pytest.mark.unit
    def test_all_ports(self):
        assert PortConfig(server=8080).all_ports() == [3000, 8080, 27017]

    @pytest.mark.unit
    def test_zero_port_rejected(self):
        with pytest.raises(ValidationError):
            PortConfig(client=0)

    @pytest.mark.unit
    def test_port_above_range_rejected(self):
        with pytest.raises(ValidationError):
            PortConfig(server=70000)

    @pytest.mark.unit
    def test_duplicate_ports_rejected(self):
        with pytest.raises(ValidationError, match="must differ"):
            PortConfig(client=5000)

    @pytest.mark.unit
    def test_duplicate_ports_from_env_rejected(self):
        with patch.dict("os.environ", {"MERN_MONGODB_PORT": "3000"}):
            with pytest.raises(ValidationError):
                Config.from_env()


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_output_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Config().output_dir.resolve() == tmp_path.resolve()

    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.database_name == "mernapp"
        assert config.app_name == "MERN App"
        assert "change-this" in config.jwt_secret

    @pytest.mark.unit
    def test_empty_database_name_rejected(self):
        with pytest.raises(ValidationError):
            Config(database_name="")


class TestDerivedValues:
    @pytest.mark.unit
    def test_mongodb_uri(self):
        assert Config().mongodb_uri == "mongodb://localhost:27017/mernapp"

    @pytest.mark.unit
    def test_mongodb_uri_follows_settings(self):
        config = Config(ports=PortConfig(mongodb=27018), database_name="blogdb")
        assert config.mongodb_uri == "mongodb://localhost:27018/blogdb"

    @pytest.mark.unit
    def test_api_url(self):
        assert Config().api_url == "http://localhost:5000/api"

    @pytest.mark.unit
    def test_client_url(self):
        assert Config(ports=PortConfig(client=4000)).client_url == "http://localhost:4000"


class TestProjectPath:
    @pytest.mark.unit
    def test_joins_name(self, tmp_path: Path):
        assert Config(output_dir=tmp_path).project_path("blog") == tmp_path / "blog"

    @pytest.mark.unit
    def test_is_absolute_for_relative_output_dir(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = Config(output_dir=Path("projects")).project_path("blog")
        assert path.is_absolute()
        assert path == tmp_path.resolve() / "projects" / "blog"

    @pytest.mark.unit
    def test_name_used_verbatim(self, tmp_path: Path):
        path = Config(output_dir=tmp_path).project_path("My Blog")
        assert path.name == "My Blog"


# ---------------------------------------------------------------------------
# from_env
# ---------------------------------------------------------------------------


class TestFromEnv:
    @pytest.mark.unit
    def test_no_env_uses_defaults(self):
        config = Config.from_env()
        assert config.ports == PortConfig()
        assert config.database_name == "mernapp"

    @pytest.mark.unit
    def test_reads_all_variables(self, tmp_path: Path):
        env = {
            "MERN_OUTPUT_DIR": str(tmp_path),
            "MERN_CLIENT_PORT": "4000",
            "MERN_SERVER_PORT": "4001",
            "MERN_MONGODB_PORT": "4002",
            "MERN_DATABASE_NAME": "blogdb",
            "MERN_APP_NAME": "Blog",
            "MERN_JWT_SECRET": "s3cret",
        }
        with patch.dict("os.environ", env):
            config = Config.from_env()

        assert config.output_dir == tmp_path
        assert config.ports.as_dict() == {"client": 4000, "server": 4001, "mongodb": 4002}
        assert config.database_name == "blogdb"
        assert config.app_name == "Blog"
        assert config.jwt_secret == "s3cret"

    @pytest.mark.unit
    def test_partial_ports(self):
        with patch.dict("os.environ", {"MERN_SERVER_PORT": "8000"}):
            config = Config.from_env()
        assert config.ports.server == 8000
        assert config.ports.client == 3000

    @pytest.mark.unit
    def test_non_numeric_port_raises(self):
        with patch.dict("os.environ", {"MERN_CLIENT_PORT": "abc"}):
            with pytest.raises(ValueError):
                Config.from_env()

    @pytest.mark.unit
    def test_out_of_range_port_raises(self):
        with patch.dict("os.environ", {"MERN_CLIENT_PORT": "0"}):
            with pytest.raises(ValidationError):
                Config.from_env()
