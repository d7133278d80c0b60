"""Request Summary — derive the per-request log line from path and query text.

Invariants:
    - operation is the second path segment ("/api/add" -> "add"), None if absent
    - num1/num2 are logged verbatim (unparsed query text)
    - Pure: no IO, never raises for any str input
"""

_MISSING = "-"


def derive_operation(path: str) -> str | None:
    """Return the second path segment, or None when the path is too short."""
    segments = path.split("/")
    if len(segments) < 3 or not segments[2]:
        return None
    return segments[2]


def summarize_request(
    method: str,
    url: str,
    operation: str | None,
    num1: str | None,
    num2: str | None,
) -> str:
    op = operation or _MISSING
    return (
        f"{method} {url} :::: {op} operation requested: "
        f"{num1 if num1 is not None else _MISSING} {op} "
        f"{num2 if num2 is not None else _MISSING}"
    )
