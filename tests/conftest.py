import json

import pytest

from truffle_contracts.config.paths import PathResolver

TRANSFER_ABI = [
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {"type": "event", "name": "Transfer", "inputs": []},
]


def write_artifact(directory, file_name, **fields):
    path = directory / file_name
    path.write_text(json.dumps(fields), encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    """A Truffle project root with an empty default build directory."""
    (tmp_path / "build" / "contracts").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def build_dir(project):
    return project / "build" / "contracts"


@pytest.fixture
def resolver(project):
    return PathResolver(workspace_root_provider=lambda: str(project))
