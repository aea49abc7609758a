import logging
from typing import Optional

from wire_check.config import Settings
from wire_check.discovery import discover_providers
from wire_check.exceptions import ParseError
from wire_check.models.ast_models import NO_POSITION, Diagnostic, Package
from wire_check.parser import GoParser
from wire_check.reporter import DiagnosticReporter, ReportFn
from wire_check.walker import CallGraphWalker

logger = logging.getLogger(__name__)

NAME = "wirechecker"
DOC = "check for direct dependency method calls in wire provider functions"


class WireChecker:
    """
    The analysis pass. Every `run` starts from scratch: the provider set,
    findings and call paths live only for the duration of the call.
    """

    def __init__(self, settings: Optional[Settings] = None, parser: Optional[GoParser] = None):
        self.settings = settings or Settings()
        self._parser = parser

    @property
    def parser(self) -> GoParser:
        if self._parser is None:
            self._parser = GoParser()
        return self._parser

    def run(self, package: Package, report: Optional[ReportFn] = None) -> list[Diagnostic]:
        """
        Analyzes `package` and returns the diagnostics in the order they were
        emitted. Never raises for problems with the wire-gen file; those
        become a single diagnostic.
        """
        if not self.settings.wire_gen:
            return []

        reporter = DiagnosticReporter(report)
        wire_gen = self.settings.wire_gen
        try:
            wire_tree = self.parser.parse_file(wire_gen)
        except ParseError as e:
            logger.warning("failed to parse wire-gen file %s: %s", wire_gen, e)
            return [reporter.emit(Diagnostic(
                NO_POSITION, f"failed to parse wire-gen file {wire_gen}: {e}"))]

        providers = discover_providers(wire_tree)
        walker = CallGraphWalker(package, recursive=self.settings.recursive)

        diagnostics: list[Diagnostic] = []
        for decl in package.functions():
            if decl.name in providers:
                diagnostics.extend(reporter.report_findings(walker.walk(decl)))
        logger.info("package %s: %d diagnostics", package.name, len(diagnostics))
        return diagnostics
