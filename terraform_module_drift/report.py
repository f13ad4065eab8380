import json
from dataclasses import asdict
from typing import List

from .analyze import EnvironmentReport


def render_text(reports: List[EnvironmentReport], verbose: bool = False) -> str:
    out = []
    for r in reports:
        out.append(f"== {r.environment}")
        if verbose:
            out.append(f"🔸 Declared vars: {list(r.declared)}")
            out.append(f"🔸 Used vars: {list(r.used)}")
            out.append(f"🔸 Referenced vars (any scope): {list(r.referenced)}")
            out.append(f"🔸 Ignored vars: {list(r.ignored)}")
        if not r.has_findings:
            out.append("✅ No variable drift detected.")
            continue
        if r.pass_through:
            out.append(f"⚠️  Declared but not used: {list(r.pass_through)}")
        for f in r.undeclared_inputs:
            out.append(
                f"❌ var.{f.variable} passed as {f.argument!r} into module {f.module!r}, "
                f"which does not declare it ({f.source_file})"
            )
    return "\n".join(out) + "\n"


def render_json(reports: List[EnvironmentReport], verbose: bool = False) -> str:
    payload = []
    for r in reports:
        entry = {
            "environment": r.environment,
            "pass_through": list(r.pass_through),
            "undeclared_inputs": [asdict(f) for f in r.undeclared_inputs],
        }
        if verbose:
            entry.update(
                declared=list(r.declared),
                used=list(r.used),
                referenced=list(r.referenced),
                ignored=list(r.ignored),
            )
        payload.append(entry)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"
