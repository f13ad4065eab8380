"""Collectors that fold classified lines into per-environment sets.

Every function here works on already-loaded ``SourceFile`` objects and has no
side effects beyond logging, so one environment can be analysed in isolation.
"""
import enum
from pathlib import Path
from typing import Dict, Iterable, List, NamedTuple

import hcl2

from .classify import (
    Assignment,
    is_block_close,
    match_assignment,
    match_declaration,
    match_module_open,
    match_references,
)
from .logs import log
from .sources import SourceFile


class Scope(enum.Enum):
    ALL = "all"
    TOP_LEVEL = "top-level"


class Invocation(NamedTuple):
    module: str
    path: Path
    line: int
    assignments: tuple


def _hcl_variable_names(data) -> list:
    names = []
    blocks = data if isinstance(data, list) else [data]
    for blk in blocks:
        if not isinstance(blk, dict) or "variable" not in blk:
            continue
        for entry in blk["variable"]:
            if isinstance(entry, dict):
                for name in entry.keys():
                    if not name.startswith("__"):
                        names.append(name.strip('"'))
    return names


def declared_in_source(src: SourceFile) -> list:
    """Variable names declared in one file, in file order.

    The file is parsed as HCL first; when that fails the line classifier
    is used on its own.
    """
    try:
        return _hcl_variable_names(hcl2.loads(src.text))
    except Exception as e:
        log(f"⚠️  Failed to parse {src.path} with hcl2 ({e}); using regex fallback.")
    names = []
    for line in src.lines:
        name = match_declaration(line)
        if name is not None:
            names.append(name)
    return names


def collect_declarations(sources: Iterable[SourceFile]) -> Dict[str, Path]:
    """Map each declared name to the first file declaring it."""
    declared: Dict[str, Path] = {}
    for src in sources:
        for name in declared_in_source(src):
            declared.setdefault(name, src.path)
    return declared


def collect_references(sources: Iterable[SourceFile], scope: Scope = Scope.ALL) -> frozenset:
    """Collect ``var.<name>`` references.

    With ``Scope.TOP_LEVEL`` every line from a ``module "..."`` open up to the
    next bare ``}`` line is skipped. Blocks do not nest: the first closing
    brace line ends the module block.
    """
    used = set()
    for src in sources:
        in_block = False
        for line in src.lines:
            if scope is Scope.TOP_LEVEL:
                if in_block:
                    if is_block_close(line):
                        in_block = False
                    continue
                if match_module_open(line) is not None:
                    in_block = True
                    continue
            used.update(match_references(line))
    return frozenset(used)


def extract_invocations(sources: Iterable[SourceFile]) -> List[Invocation]:
    """Return every module block with its ``argument = value`` assignments.

    A block left open at the end of a file is closed there.
    """
    invocations = []
    for src in sources:
        current = None
        for lineno, line in enumerate(src.lines, start=1):
            if current is None:
                module = match_module_open(line)
                if module is not None:
                    current = (module, lineno, [])
                continue
            if is_block_close(line):
                invocations.append(Invocation(current[0], src.path, current[1], tuple(current[2])))
                current = None
                continue
            assignment = match_assignment(line)
            if assignment is not None:
                current[2].append(assignment)
        if current is not None:
            invocations.append(Invocation(current[0], src.path, current[1], tuple(current[2])))
    return invocations


def passed_references(invocation: Invocation) -> List[Assignment]:
    return [a for a in invocation.assignments if a.reference is not None]
