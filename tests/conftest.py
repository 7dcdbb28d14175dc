"""
Pytest configuration og shared fixtures.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import httpx
import pytest

from solr_post.models import build_post_config


class FakeSolr:
    """In-process stand-in for a Solr update handler, served through httpx.MockTransport."""

    def __init__(
        self,
        delay: float = 0.0,
        fail_names: Iterable[str] = (),
        fail_status: int = 500,
        commit_status: int = 200,
    ):
        self.delay = delay
        self.fail_names = set(fail_names)
        self.fail_status = fail_status
        self.commit_status = commit_status

        self.uploads: List[httpx.Request] = []
        self.bodies: Dict[str, bytes] = {}
        self.commits: List[httpx.Request] = []
        self.active = 0
        self.peak_active = 0

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            self.commits.append(request)
            return httpx.Response(self.commit_status, json={"responseHeader": {"status": 0}})

        self.active += 1
        self.peak_active = max(self.peak_active, self.active)
        try:
            body = await request.aread()
            if self.delay:
                await asyncio.sleep(self.delay)

            name = request.url.params["resource.name"]
            self.uploads.append(request)
            self.bodies[name] = body

            if Path(name).name in self.fail_names:
                return httpx.Response(self.fail_status, text="boom")
            return httpx.Response(200, json={"responseHeader": {"status": 0}})
        finally:
            self.active -= 1

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def uploaded_names(self) -> List[str]:
        return sorted(Path(r.url.params["resource.name"]).name for r in self.uploads)


@pytest.fixture
def fake_solr():
    return FakeSolr()


@pytest.fixture
def make_solr():
    """Factory for FakeSolr instances with custom failure behaviour."""
    return FakeSolr


@pytest.fixture
def make_tree(tmp_path):
    """Create files below tmp_path from a {relative_path: content} mapping."""

    def _make(files: Dict[str, str], root: Optional[Path] = None) -> Path:
        base = root or tmp_path
        for relative, content in files.items():
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return base

    return _make


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        values = {
            "collection": "portal",
            "directory_path": tmp_path,
            "file_extensions": ["html"],
            "concurrency": 2,
        }
        values.update(overrides)
        return build_post_config(**values)

    return _make


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep SOLR_POST_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("SOLR_POST_"):
            monkeypatch.delenv(name)
