"""Shared fixtures that lay out environment and module trees on disk."""

from pathlib import Path

import pytest

from terraform_module_drift.sources import SourceFile

ENV_VARIABLES = """\
variable "region" {}

variable "instance_count" {
  type = number
}
"""

ENV_MAIN = """\
output "region" {
  value = var.region
}

module "vm" {
  source = "../../modules/vm"
  count  = var.instance_count
}
"""


def write_files(root: Path, files: dict) -> Path:
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def source(text: str, name: str = "main.tf") -> SourceFile:
    return SourceFile(Path(name), tuple(text.splitlines()))


@pytest.fixture
def tree(tmp_path):
    """Environments and modules roots with one ``dev`` environment."""
    envs = tmp_path / "environments"
    mods = tmp_path / "modules"
    write_files(envs, {"dev/variables.tf": ENV_VARIABLES, "dev/main.tf": ENV_MAIN})
    mods.mkdir()
    return envs, mods
