"""Line-local pattern matchers for Terraform text.

Classification is best-effort: a line is matched on its own, with no
knowledge of surrounding lines, comments or string literals.
"""
import re
from typing import NamedTuple, Optional

DECLARATION_RE = re.compile(r'^\s*variable\s+"([A-Za-z0-9_-]+)"')
REFERENCE_RE = re.compile(r"(?<![A-Za-z0-9_])var\.([A-Za-z0-9_]+)")
MODULE_OPEN_RE = re.compile(r'^\s*module\s+"([^"]+)"')
ASSIGNMENT_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_-]*)\s*=(?!=)\s*(.*)$")


class Assignment(NamedTuple):
    argument: str
    value: str
    reference: Optional[str]


def match_declaration(line: str) -> Optional[str]:
    m = DECLARATION_RE.match(line)
    return m.group(1) if m else None


def match_references(line: str) -> list:
    """Return every ``var.<name>`` identifier found in the line, in order."""
    return REFERENCE_RE.findall(line)


def match_module_open(line: str) -> Optional[str]:
    m = MODULE_OPEN_RE.match(line)
    return m.group(1) if m else None


def is_block_close(line: str) -> bool:
    return line.strip() == "}"


def match_assignment(line: str) -> Optional[Assignment]:
    """Match ``name = value``; ``reference`` is the first variable the value reads."""
    m = ASSIGNMENT_RE.match(line)
    if not m:
        return None
    value = m.group(2).strip()
    refs = match_references(value)
    return Assignment(m.group(1), value, refs[0] if refs else None)
