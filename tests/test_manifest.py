import pytest

from core.manifest import (
    ManifestError,
    classify_dependency,
    get_dependency_spec,
    get_dependency_version,
    strip_version_requirement,
)
from core.models import LocalPath, RegistryVersion


@pytest.mark.parametrize("requirement", ["^1.2.3", "~1.2.3", "1.2.3", '"1.2.3"'])
def test_strip_version_requirement(requirement):
    assert strip_version_requirement(requirement) == "1.2.3"


def test_classify_plain_string():
    assert classify_dependency("^0.14.0") == RegistryVersion("0.14.0")


def test_classify_table_with_version():
    assert classify_dependency({"version": "~0.13", "features": ["dynamic_linking"]}) == RegistryVersion("0.13")


def test_classify_path_wins_over_version():
    spec = classify_dependency({"path": "../bevy", "version": "0.14"})
    assert spec == LocalPath("../bevy")
    assert spec.specifier == "../bevy"


@pytest.mark.parametrize("entry", [None, {"git": "https://github.com/bevyengine/bevy"}, 14, {"workspace": True}])
def test_classify_unresolvable_shapes(entry):
    assert classify_dependency(entry) is None


def test_version_from_string_entry(write_manifest, project_dir):
    write_manifest('bevy = "^0.14.0"\n')
    assert get_dependency_version(project_dir) == "0.14.0"


def test_version_from_table_entry(write_manifest, project_dir):
    write_manifest('bevy = { version = "0.14.0", default-features = false }\n')
    assert get_dependency_version(project_dir) == "0.14.0"


def test_local_path_entry_is_verbatim(write_manifest, project_dir):
    write_manifest('bevy = { path = "../local-dep" }\n')
    assert get_dependency_spec(project_dir) == LocalPath("../local-dep")
    assert get_dependency_version(project_dir) == "../local-dep"


def test_missing_dependency_is_none(write_manifest, project_dir):
    write_manifest('serde = "1"\n')
    assert get_dependency_version(project_dir) is None


def test_manifest_without_dependencies_table(project_dir):
    (project_dir / "Cargo.toml").write_text('[package]\nname = "game"\n')
    assert get_dependency_version(project_dir) is None


def test_missing_manifest_raises(project_dir):
    with pytest.raises(ManifestError, match="cannot read"):
        get_dependency_version(project_dir)


def test_invalid_toml_raises(project_dir):
    (project_dir / "Cargo.toml").write_text("[dependencies\nbevy = ")
    with pytest.raises(ManifestError, match="cannot parse"):
        get_dependency_version(project_dir)
