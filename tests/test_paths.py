import json
import os

import pytest

from truffle_contracts.config.paths import DirectoryRole, PathResolver
from truffle_contracts.config.truffle import get_truffle_configuration
from truffle_contracts.config.workspace import Workspace, get_path_by_platform
from truffle_contracts.exceptions import ConfigurationError, WorkspaceRootNotFound


def make_resolver(configuration, root="/projects/token", calls=None):
    def provider(work_dir, config_name):
        if calls is not None:
            calls.append((work_dir, config_name))
        return configuration

    return PathResolver(
        configuration_provider=provider,
        workspace_root_provider=lambda: root,
    )


@pytest.mark.parametrize("role", list(DirectoryRole))
def test_absolute_directory_returned_verbatim(tmp_path, role):
    absolute = str(tmp_path / "elsewhere")
    resolver = make_resolver({role.value: absolute})

    assert resolver.resolve_directory(role) == absolute


@pytest.mark.parametrize("role", list(DirectoryRole))
@pytest.mark.parametrize("configured", ["contracts", "build/contracts", "./out"])
def test_relative_directory_joined_to_root(role, configured):
    resolver = make_resolver({role.value: configured})

    expected = os.path.normpath(os.path.join("/projects/token", configured))
    assert resolver.resolve_directory(role) == expected


def test_missing_directory_setting_resolves_to_root():
    resolver = make_resolver({})

    assert resolver.resolve_directory(DirectoryRole.BUILD) == os.path.normpath("/projects/token")


def test_workspace_overrides_root_and_config_name():
    calls = []
    resolver = make_resolver({"contracts_directory": "src"}, calls=calls)
    workspace = Workspace("/work/other", "truffle-config.ci.json")

    path = resolver.get_contracts_folder_path(workspace)

    assert path == os.path.normpath("/work/other/src")
    assert calls == [("/work/other", "truffle-config.ci.json")]


def test_ambient_root_has_no_config_override():
    calls = []
    resolver = make_resolver({"migrations_directory": "migrations"}, calls=calls)

    resolver.get_migration_folder_path()

    assert calls == [("/projects/token", None)]


def test_missing_ambient_root_is_an_error():
    resolver = make_resolver({}, root=None)

    with pytest.raises(WorkspaceRootNotFound):
        resolver.get_build_folder_path()


def test_default_provider_reads_truffle_defaults(project, resolver):
    assert resolver.get_build_folder_path() == str(project / "build" / "contracts")
    assert resolver.get_migration_folder_path() == str(project / "migrations")


def test_default_provider_reads_named_config(project):
    (project / "custom.json").write_text(
        json.dumps({"contracts_build_directory": "out/abi"}), encoding="utf-8"
    )
    resolver = PathResolver()

    path = resolver.get_build_folder_path(Workspace(str(project), "custom.json"))

    assert path == str(project / "out" / "abi")


def test_configuration_file_overrides_defaults(tmp_path):
    (tmp_path / "truffle-config.json").write_text(
        json.dumps({"contracts_directory": "sol"}), encoding="utf-8"
    )

    configuration = get_truffle_configuration(str(tmp_path))

    assert configuration["contracts_directory"] == "sol"
    assert configuration["migrations_directory"] == "migrations"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_configuration_raises(tmp_path, content):
    (tmp_path / "truffle-config.json").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        get_truffle_configuration(str(tmp_path))


def test_workspace_root_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TRUFFLE_WORKSPACE_ROOT", str(tmp_path))

    assert PathResolver().get_build_folder_path() == str(tmp_path / "build" / "contracts")


@pytest.mark.parametrize(
    "platform,path,expected",
    [
        ("win32", "/c:/projects/token", "c:/projects/token"),
        ("win32", "c:/projects/token", "c:/projects/token"),
        ("linux", "/c:/projects/token", "/c:/projects/token"),
        ("darwin", "/Users/dev/token", "/Users/dev/token"),
    ],
)
def test_get_path_by_platform(platform, path, expected):
    assert get_path_by_platform(path, platform) == expected


@pytest.mark.parametrize("value", [42, ["build"], {"dir": "build"}])
def test_non_string_directory_setting_raises(tmp_path, value):
    (tmp_path / "truffle-config.json").write_text(
        json.dumps({"contracts_build_directory": value}), encoding="utf-8"
    )

    with pytest.raises(ConfigurationError) as exc_info:
        PathResolver().get_build_folder_path(Workspace(str(tmp_path)))

    assert "contracts_build_directory" in str(exc_info.value)
