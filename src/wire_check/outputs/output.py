import json
from typing import Iterable, Optional, TextIO

from wire_check.models.ast_models import Diagnostic


# --- Pretty printing & JSON export ------------------------------------------

def format_diagnostic(diagnostic: Diagnostic) -> str:
    """
    `path:line:col: message` with 1-based coordinates, the way Go tools print.
    """
    pos = diagnostic.position
    if not pos.is_valid:
        return diagnostic.message
    return f"{pos.path}:{pos.line + 1}:{pos.col + 1}: {diagnostic.message}"


def print_diagnostics(diagnostics: Iterable[Diagnostic], stream: Optional[TextIO] = None):
    """Writes one line per diagnostic to `stream`, or to the current sys.stdout."""
    for d in diagnostics:
        print(format_diagnostic(d), file=stream)


def to_json(diagnostics: Iterable[Diagnostic]) -> str:
    """
    Serializes diagnostics to a JSON list, coordinates 1-based.
    """
    out = []
    for d in diagnostics:
        pos = d.position
        out.append({
            "path": pos.path,
            "line": pos.line + 1 if pos.is_valid else None,
            "col": pos.col + 1 if pos.is_valid else None,
            "message": d.message,
        })
    return json.dumps(out, indent=2)
