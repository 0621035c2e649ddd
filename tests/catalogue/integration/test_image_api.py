"""Integration tests for the lesson image endpoint."""

import pytest
from catalogue.api import image_router
from catalogue.shared.images import resolve_image, safe_filename
from fastapi import FastAPI
from fastapi.testclient import TestClient

PNG_BYTES = b"\x89PNG\r\n\x1a\n fake image body"


@pytest.fixture()
def images(tmp_path, monkeypatch):
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "mathematics.png").write_bytes(PNG_BYTES)
    (tmp_path / "secret.txt").write_text("not for you")
    monkeypatch.setenv("LESSONSHOP_IMAGES_DIR", str(directory))
    return directory


@pytest.fixture()
def client(images):
    app = FastAPI()
    app.include_router(image_router)
    return TestClient(app)


class TestSafeFilename:
    def test_plain_name(self):
        assert safe_filename("music.png") == "music.png"

    def test_strips_posix_directories(self):
        assert safe_filename("../../etc/passwd") == "passwd"

    def test_strips_windows_directories(self):
        assert safe_filename("..\\..\\secret.txt") == "secret.txt"


class TestResolveImage:
    def test_existing_file(self, images):
        assert resolve_image("mathematics.png") == images / "mathematics.png"

    def test_missing_file(self, images):
        assert resolve_image("physics.png") is None

    def test_parent_reference(self, images):
        assert resolve_image("..") is None

    def test_traversal_stays_inside_directory(self, images):
        assert resolve_image("../secret.txt") is None

    def test_explicit_directory(self, tmp_path):
        (tmp_path / "art-design.png").write_bytes(PNG_BYTES)
        assert resolve_image("art-design.png", directory=tmp_path) == tmp_path / "art-design.png"


class TestImageEndpoint:
    def test_serves_image(self, client):
        response = client.get("/images/mathematics.png")
        assert response.status_code == 200
        assert response.content == PNG_BYTES
        assert response.headers["content-type"] == "image/png"

    def test_missing_image(self, client):
        response = client.get("/images/physics.png")
        assert response.status_code == 404
        assert response.json() == {"message": "Error: Image not found"}

    def test_traversal_is_reduced_to_basename(self, client):
        response = client.get("/images/..%2Fsecret.txt")
        assert response.status_code == 404

    def test_nested_path_resolves_to_basename(self, client):
        response = client.get("/images/some/dir/mathematics.png")
        assert response.status_code == 200
        assert response.content == PNG_BYTES
