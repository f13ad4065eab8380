from pathlib import Path
from typing import NamedTuple

from .errors import ConfigurationError
from .logs import log

# --- Config
TF_EXT = ".tf"
IGNORE_DIR_PATTERNS = ("/.terraform/", "/.git/", "/vendor/", "/third_party/")
IGNORELIST_FILE = ".tfdriftignore"
IGNORE_DIR_NAMES = frozenset(s.strip("/") for s in IGNORE_DIR_PATTERNS)


class SourceFile(NamedTuple):
    path: Path
    lines: tuple

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


def require_dir(path: Path, label: str) -> Path:
    if not path.is_dir():
        raise ConfigurationError(f"{label} {path} does not exist or is not a directory")
    return path


def should_skip(path: Path) -> bool:
    p = "/" + path.as_posix().lstrip("/")
    if any(s in p for s in IGNORE_DIR_PATTERNS):
        log(f"⏩ Skipping ignored directory: {path}")
        return True
    return False


def list_tf_files(root: Path) -> list:
    """All ``.tf`` files below ``root``, sorted, minus ignored directories."""
    return sorted(
        p for p in root.rglob(f"*{TF_EXT}")
        if p.is_file() and not should_skip(p.relative_to(root))
    )


def list_subdirs(root: Path) -> list:
    return sorted(
        p for p in root.iterdir()
        if p.is_dir() and p.name not in IGNORE_DIR_NAMES
    )


def read_source(path: Path):
    """Read one file; unreadable files are logged and yield ``None``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return SourceFile(path, tuple(f.read().splitlines()))
    except (OSError, UnicodeDecodeError) as e:
        log(f"⚠️  Could not read {path}: {e}")
        return None


def load_sources(root: Path) -> list:
    sources = []
    for path in list_tf_files(root):
        src = read_source(path)
        if src is not None:
            sources.append(src)
    return sources


def load_ignorelist(path: Path) -> frozenset:
    names = set()
    if path.exists():
        log(f"🧾 Loading ignore list from {path}")
        for line in path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            names.add(line)
        log(f"✅ Ignored vars: {sorted(names)}")
    else:
        log(f"ℹ️  No {path.name} file found.")
    return frozenset(names)
