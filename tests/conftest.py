"""Test configuration and fixtures."""

import random
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

from xfwall.config import Config, XfconfConfig
from xfwall.exceptions import PropertyNotFoundError, TransportError
from xfwall.selector import ImageSelector
from xfwall.session import DesktopSession
from xfwall.xfconf import XfconfClient
from xfwall.xfconf.transport import XfconfTransport, Value, encode_value


class FakeTransport(XfconfTransport):
    """In-memory stand-in for xfconf-query, storing raw property text."""

    def __init__(self, properties: Optional[Dict[str, str]] = None) -> None:
        super().__init__(XfconfConfig())
        self.properties: Dict[str, str] = dict(properties or {})
        self.failing_writes: set = set()
        self.failing_reads: set = set()
        self.writes: List[tuple] = []

    def get(self, channel: str, path: str) -> str:
        if path in self.failing_reads:
            raise TransportError(f"Timeout reading {path}")
        if path not in self.properties:
            raise PropertyNotFoundError(channel, path)
        return self.properties[path]

    def set(self, channel: str, path: str, value: Value) -> None:
        if path in self.failing_writes:
            raise TransportError(f"Timeout writing {path}")
        self.properties[path] = encode_value(value)[1]
        self.writes.append((path, value))

    def list_properties(self, channel: str, prefix: str) -> List[str]:
        return [key for key in self.properties if key.startswith(prefix)]


class ScriptedRandom(random.Random):
    """Random source whose randrange() returns scripted indices."""

    def __init__(self, indices: Iterable[int]) -> None:
        super().__init__(0)
        self.indices = list(indices)
        self.calls: List[int] = []

    def randrange(self, *args, **kwargs):
        stop = args[-1] if len(args) > 1 else args[0]
        self.calls.append(stop)
        if self.indices:
            return self.indices.pop(0)
        return 0


def desktop_properties(monitors: Iterable[str], workspaces: int, image: str = "/usr/share/backgrounds/default.png") -> Dict[str, str]:
    """Build backdrop properties for the given monitors and workspace count."""
    properties = {}
    for monitor in monitors:
        for workspace in range(workspaces):
            base = f"/backdrop/screen0/monitor{monitor}/workspace{workspace}"
            properties[f"{base}/color-style"] = "0"
            properties[f"{base}/image-style"] = "5"
            properties[f"{base}/last-image"] = image
    return properties


def image_property(monitor: str, workspace: int) -> str:
    return f"/backdrop/screen0/monitor{monitor}/workspace{workspace}/last-image"


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Transport for a two-monitor, two-workspace desktop in per-workspace mode."""
    properties = desktop_properties(["HDMI-1", "DP-1"], 2)
    properties["/backdrop/single-workspace-mode"] = "false"
    properties["/backdrop/single-workspace-number"] = "0"
    return FakeTransport(properties)


@pytest.fixture
def client(fake_transport: FakeTransport) -> XfconfClient:
    return XfconfClient(XfconfConfig(), transport=fake_transport)


@pytest.fixture
def image_files(tmp_path: Path) -> List[str]:
    """Three existing image files."""
    paths = []
    for name in ("forest.jpg", "night.png", "ocean.jpg"):
        path = tmp_path / "images" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG")
        paths.append(str(path))
    return paths


@pytest.fixture
def list_file(tmp_path: Path, image_files: List[str]) -> Path:
    """List file naming the image files plus a comment and a missing file."""
    path = tmp_path / "backdrops.list"
    path.write_text(
        "# xfdesktop backdrop list\n"
        + "\n".join(image_files)
        + "\n/nonexistent/gone.jpg\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def session(fake_transport: FakeTransport) -> DesktopSession:
    """Desktop session over the fake transport with a seeded selector."""
    return DesktopSession.from_config(
        Config(),
        transport=fake_transport,
        selector=ImageSelector(rng=random.Random(42)),
    )
