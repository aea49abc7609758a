from typing import Callable, Iterable, Optional

from wire_check.models.ast_models import Diagnostic, MethodCallFinding

ReportFn = Callable[[Diagnostic], None]


def format_message(finding: MethodCallFinding) -> str:
    """
    `helper() directly calls dep.Start() in wire provider function`, with
    ` (via call path: A -> B)` appended when the finding was reached through
    other functions.
    """
    function = finding.call_path[-1] if finding.call_path else "<unknown>"
    message = (f"{function}() directly calls {finding.receiver}.{finding.method}() "
               f"in wire provider function")
    if len(finding.call_path) > 1:
        message += f" (via call path: {' -> '.join(finding.call_path)})"
    return message


class DiagnosticReporter:
    """
    Turns findings into diagnostics, one each, positioned at the call site,
    and hands them to the host's `report` callable.
    """

    def __init__(self, report: Optional[ReportFn] = None):
        self._report = report

    def emit(self, diagnostic: Diagnostic) -> Diagnostic:
        if self._report is not None:
            self._report(diagnostic)
        return diagnostic

    def report_findings(self, findings: Iterable[MethodCallFinding]) -> list[Diagnostic]:
        return [self.emit(Diagnostic(f.position, format_message(f))) for f in findings]
