"""Shared fixtures for wren tests."""

import pytest

from wren.app import App
from wren.config import AppConfig
from wren.observe import NullObserver


@pytest.fixture
def app() -> App:
    """An app with static serving disabled and no request logging."""
    return App(AppConfig(static_dir=None), observer=NullObserver())


@pytest.fixture
def public_dir(tmp_path):
    """A static root with a few files, a nested index, and a secret outside it."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Home</h1>")
    (public / "app.js").write_text("console.log('hello');")
    (public / "style.css").write_text("body { color: red; }")
    (public / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (public / "data.bin").write_bytes(b"\x00\x01\x02\x03")

    docs = public / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")

    (tmp_path / "secret.txt").write_text("top secret")
    return public
