import logging
from dataclasses import replace
from typing import Optional

from wire_check.models.ast_models import FunctionDecl, MethodCallFinding, Package
from wire_check.scanner import find_function_calls, find_method_calls

logger = logging.getLogger(__name__)

# Longest call path ever scanned, originating provider included.
MAX_CALL_PATH = 10


class CallGraphWalker:
    """
    Scans a provider for coupling findings and, when `recursive` is set,
    follows calls into other functions of the same package.

    Each call returns its findings instead of appending to shared state, and
    the call path is an immutable tuple extended per branch, so sibling
    branches never see each other's path.
    """

    def __init__(self, package: Package, recursive: bool = False):
        self.package = package
        self.recursive = recursive

    def walk(self, decl: FunctionDecl,
             call_path: Optional[tuple[str, ...]] = None) -> list[MethodCallFinding]:
        if call_path is None:
            call_path = (decl.name,)

        findings = [replace(f, call_path=call_path) for f in find_method_calls(decl)]
        if not self.recursive:
            return findings

        if len(call_path) >= MAX_CALL_PATH:
            logger.debug("call path %s at depth limit, not descending", " -> ".join(call_path))
            return findings

        for ref in find_function_calls(decl):
            if ref.name in call_path:
                logger.debug("skipping %s: already on call path %s", ref.name, " -> ".join(call_path))
                continue
            callee = self.package.find_function(ref.name, ref.qualifier)
            if callee is None:
                logger.debug("unresolved call %s%s in %s",
                             f"{ref.qualifier}." if ref.qualifier else "", ref.name, decl.name)
                continue
            findings.extend(self.walk(callee, call_path + (ref.name,)))
        return findings
