"""
Tests for the API router endpoints.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from vfs_shell.container import container
from vfs_shell.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def app_file_system(memory_fs):
    """Point the application container at the in-memory test file system."""
    container.set_file_system(memory_fs)
    yield memory_fs
    container.reset()


class TestCommandsAPI:
    """Test cases for the command endpoints."""

    def test_list_commands(self):
        response = client.get("/commands")

        assert response.status_code == 200
        names = [c["name"] for c in response.json()["commands"]]
        assert names == ["touch", "mkdir", "cp", "mv", "rm", "diff"]
        mkdir = response.json()["commands"][1]
        assert mkdir["usage"] == "mkdir [-p] directory..."
        assert mkdir["description"] == "Create directories"

    def test_run_command_success(self, app_file_system):
        response = client.post(
            "/commands/mkdir", json={"args": ["-p", "docs/api"], "cwd": "/projects/app"}
        )

        assert response.status_code == 200
        assert response.json() == {"exit_code": 0, "stdout": "", "stderr": ""}
        assert app_file_system.stat("/projects/app/docs/api").is_dir

    def test_run_command_failure_is_a_result(self):
        response = client.post(
            "/commands/touch", json={"args": ["/etc/passwd"], "cwd": "/projects/app"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["exit_code"] == 1
        assert data["stderr"].startswith("touch: write access denied to /etc/passwd.")

    def test_run_command_uses_default_cwd(self, app_file_system):
        with patch("vfs_shell.api.routers.get_default_cwd", return_value="/tmp"):
            response = client.post("/commands/touch", json={"args": ["note.txt"]})

        assert response.json()["exit_code"] == 0
        assert app_file_system.stat("/tmp/note.txt").is_file

    def test_run_diff(self, app_file_system):
        app_file_system.write_file("/tmp/a.txt", "hello\nworld\n")
        app_file_system.write_file("/tmp/b.txt", "hello\nplanet\n")

        response = client.post(
            "/commands/diff", json={"args": ["a.txt", "b.txt"], "cwd": "/tmp"}
        )

        assert response.json() == {
            "exit_code": 1,
            "stdout": "",
            "stderr": "2c2\n< world\n---\n> planet\n",
        }

    def test_unknown_command(self):
        response = client.post("/commands/ls", json={"args": []})

        assert response.status_code == 404
        assert response.json()["detail"] == "Unknown command: ls"

    def test_patched_commands(self):
        with patch("vfs_shell.api.routers.get_commands") as mock_get_commands:
            mock_get_commands.return_value = {}

            response = client.post("/commands/touch", json={"args": ["x"]})

            assert response.status_code == 404
            mock_get_commands.assert_called_once()


class TestSecurityAPI:
    """Test cases for the write-check endpoint."""

    def test_allowed_path(self):
        response = client.get("/security/write-check", params={"path": "/tmp/x.txt"})

        assert response.status_code == 200
        assert response.json() == {"path": "/tmp/x.txt", "allowed": True, "message": None}

    def test_relative_path_is_allowed(self):
        response = client.get("/security/write-check", params={"path": "src/a.py"})

        assert response.json()["allowed"] is True

    def test_denied_path_explains_zones(self):
        response = client.get(
            "/security/write-check", params={"path": "/etc/passwd", "cwd": "/srv"}
        )

        data = response.json()
        assert data["allowed"] is False
        assert data["message"].startswith("Write access denied to /etc/passwd.")
        assert "- /tmp/ directory and its subdirectories" in data["message"]
        assert "Current working directory: /srv" in data["message"]

    def test_cwd_zone(self):
        response = client.get(
            "/security/write-check", params={"path": "/srv/site/a", "cwd": "/srv/site"}
        )

        assert response.json()["allowed"] is True

    def test_missing_path_parameter(self):
        response = client.get("/security/write-check")

        assert response.status_code == 422
