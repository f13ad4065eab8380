"""Cross-reference environment variables against module declarations."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

from .collect import (
    Scope,
    collect_declarations,
    collect_references,
    extract_invocations,
    passed_references,
)
from .logs import log
from .modules import ModuleIndex
from .sources import SourceFile, list_subdirs, load_sources, require_dir


@dataclass(frozen=True, order=True)
class UndeclaredInput:
    """Variable ``variable`` passed as ``argument`` into ``module``, which does not declare it."""

    environment: str
    variable: str
    argument: str
    module: str
    source_file: str = field(compare=False)


@dataclass(frozen=True)
class EnvironmentReport:
    environment: str
    pass_through: Tuple[str, ...]
    undeclared_inputs: Tuple[UndeclaredInput, ...]
    declared: Tuple[str, ...] = ()
    used: Tuple[str, ...] = ()
    referenced: Tuple[str, ...] = ()
    ignored: Tuple[str, ...] = ()

    @property
    def has_findings(self) -> bool:
        return bool(self.pass_through or self.undeclared_inputs)


def analyze_sources(
    environment: str,
    sources: List[SourceFile],
    module_inputs: Callable[[str], frozenset],
    ignore: Iterable[str] = (),
) -> EnvironmentReport:
    """Findings for one environment's already-loaded files.

    A variable only referenced inside a module block counts as used once the
    module declares the argument it is passed as; otherwise it yields an
    undeclared-input finding and stays pass-through.
    """
    ignore = frozenset(ignore)
    declared = collect_declarations(sources)
    used = set(collect_references(sources, Scope.TOP_LEVEL))

    undeclared = {}
    for invocation in extract_invocations(sources):
        for assignment in passed_references(invocation):
            if assignment.argument in module_inputs(invocation.module):
                used.add(assignment.reference)
                continue
            key = (assignment.reference, assignment.argument, invocation.module)
            undeclared.setdefault(key, str(invocation.path))

    pass_through = sorted(set(declared) - used - ignore)
    findings = sorted(
        UndeclaredInput(environment, variable, argument, module, path)
        for (variable, argument, module), path in undeclared.items()
        if variable not in ignore
    )
    return EnvironmentReport(
        environment=environment,
        pass_through=tuple(pass_through),
        undeclared_inputs=tuple(findings),
        declared=tuple(sorted(declared)),
        used=tuple(sorted(used)),
        referenced=tuple(sorted(collect_references(sources, Scope.ALL))),
        ignored=tuple(sorted(ignore & set(declared))),
    )


def analyze_environment(env_dir: Path, modules_root: Path, ignore: Iterable[str] = ()) -> EnvironmentReport:
    log(f"📂 Scanning environment {env_dir.name}")
    index = ModuleIndex(modules_root)
    return analyze_sources(env_dir.name, load_sources(env_dir), index.inputs, ignore)


def analyze(environments_root: Path, modules_root: Path, ignore: Iterable[str] = ()) -> List[EnvironmentReport]:
    """Analyse every environment directory under ``environments_root``.

    Raises ConfigurationError before scanning anything if a root is missing.
    """
    require_dir(environments_root, "Environments root")
    require_dir(modules_root, "Modules root")
    return [analyze_environment(env_dir, modules_root, ignore) for env_dir in list_subdirs(environments_root)]
