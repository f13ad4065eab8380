import sys


def log(msg: str):
    """Simple structured logger."""
    print(f"[LOG] {msg}", file=sys.stderr)
