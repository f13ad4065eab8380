from pathlib import Path

from .collect import collect_declarations
from .logs import log
from .sources import load_sources


def module_inputs(module: str, modules_root: Path) -> frozenset:
    """Input variables declared by ``modules_root/<module>``.

    A missing module declares nothing.
    """
    module_dir = modules_root / module
    if not module_dir.is_dir():
        log(f"🔍 Module {module!r} not found under {modules_root}")
        return frozenset()
    return frozenset(collect_declarations(load_sources(module_dir)))


class ModuleIndex:
    """Per-environment memo over ``module_inputs``.

    One index is built for each environment and dropped with it.
    """

    def __init__(self, modules_root: Path):
        self.modules_root = modules_root
        self._inputs = {}

    def inputs(self, module: str) -> frozenset:
        if module not in self._inputs:
            self._inputs[module] = module_inputs(module, self.modules_root)
        return self._inputs[module]
