import pathlib
import textwrap

import pytest

from core.config import Settings


# Isolate HOME and the server's environment so nothing touches the real ~/.cargo
@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(pathlib.Path, "home", lambda: home)
    for var in (
        "CARGO_HOME",
        "BEVY_EXAMPLES_PROJECT_DIR",
        "BEVY_EXAMPLES_MAX_LINES",
        "BEVY_EXAMPLES_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield home


@pytest.fixture
def project_dir(tmp_path):
    path = tmp_path / "game"
    path.mkdir()
    return path


@pytest.fixture
def cargo_home(tmp_path):
    path = tmp_path / "cargo"
    (path / "registry" / "src").mkdir(parents=True)
    return path


@pytest.fixture
def write_manifest(project_dir):
    """Write Cargo.toml with the given [dependencies] body."""
    def _write(dependencies: str) -> pathlib.Path:
        manifest = project_dir / "Cargo.toml"
        manifest.write_text(
            '[package]\nname = "game"\nversion = "0.1.0"\n\n[dependencies]\n'
            + textwrap.dedent(dependencies)
        )
        return manifest
    return _write


@pytest.fixture
def make_registry_crate(cargo_home):
    """Create <cargo home>/registry/src/<registry>/<crate_dir>/ and return it."""
    def _make(registry: str, crate_dir: str) -> pathlib.Path:
        path = cargo_home / "registry" / "src" / registry / crate_dir
        path.mkdir(parents=True)
        return path
    return _make


@pytest.fixture
def bevy_source(make_registry_crate):
    """bevy-0.14.0 in the registry cache with a small examples/ tree."""
    src = make_registry_crate("index.crates.io-6f17d22bba15001f", "bevy-0.14.0")
    examples = src / "examples"
    (examples / "2d").mkdir(parents=True)
    (examples / "hello_world.rs").write_text('fn main() {\n    println!("hello");\n}\n')
    (examples / "README.md").write_text("# Examples\n")
    (examples / "2d" / "sprite.rs").write_text("// sprite\nfn main() {}\n")
    return src


@pytest.fixture
def settings(project_dir, cargo_home):
    return Settings(project_dir=project_dir, cargo_home=cargo_home)


@pytest.fixture
def server_env(monkeypatch, project_dir, cargo_home):
    """Point the MCP tools (which read Settings from the environment) at tmp dirs."""
    monkeypatch.setenv("BEVY_EXAMPLES_PROJECT_DIR", str(project_dir))
    monkeypatch.setenv("CARGO_HOME", str(cargo_home))
