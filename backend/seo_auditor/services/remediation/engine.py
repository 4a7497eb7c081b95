"""
Remediation Engine - Apply safe fixes from a prior audit to a stored HTML file.

The patching itself is a pure text -> text fold over the issue list; the
file is read once and written at most once, only when a route fired.
Line endings are preserved. Callers that need rollback must copy the file
first.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from seo_auditor.exceptions import DocumentNotFound, DocumentOutsideRoot
from seo_auditor.logger import logger
from seo_auditor.schemas.audit_request import RemediationContext, RemediationIssue
from seo_auditor.schemas.audit_result import RemediationOutcome
from seo_auditor.services.remediation.routes import ROUTES, Route

IssueLike = Union[RemediationIssue, dict]


class RemediationEngine:
    """Routes issues to fixes and applies them."""

    def __init__(self, routes: Iterable[Route] = ROUTES, root: Optional[Union[str, Path]] = None):
        self.routes = tuple(routes)
        self.root = Path(root).resolve() if root else None

    def route_for(self, check_id: str) -> Optional[Route]:
        for route in self.routes:
            if route.matches(check_id):
                return route
        return None

    def apply(
        self,
        text: str,
        issues: Iterable[IssueLike],
        context: Optional[RemediationContext] = None
    ) -> tuple[str, list[str]]:
        """Apply every routable issue, left to right.

        Args:
            text: Document text
            issues: Selected issues (check_id + fix_instruction)
            context: Site id and display name for default fragments

        Returns:
            Tuple of (patched text, change descriptions)
        """
        context = context or RemediationContext()
        changes = []

        for issue in issues:
            if isinstance(issue, dict):
                issue = RemediationIssue.model_validate(issue)

            route = self.route_for(issue.check_id)
            if route is None:
                logger.debug(f"No remediation route for {issue.check_id}, skipping")
                continue

            text, change = route.apply(text, issue, context)
            if change:
                changes.append(change)

        return text, changes

    def remediate(
        self,
        file_path: Union[str, Path],
        issues: Iterable[IssueLike],
        context: Optional[RemediationContext] = None
    ) -> RemediationOutcome:
        """Patch a stored document in place.

        Raises:
            DocumentOutsideRoot: file_path escapes the configured root
            DocumentNotFound: file_path does not exist
        """
        path = Path(file_path)
        if self.root is not None and not path.resolve().is_relative_to(self.root):
            raise DocumentOutsideRoot(str(file_path), str(self.root))
        if not path.is_file():
            raise DocumentNotFound(str(file_path))

        # newline="" keeps CRLF documents byte-for-byte
        with path.open(encoding="utf-8", newline="") as f:
            original = f.read()

        fixed, changes = self.apply(original, issues, context)
        if fixed != original:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(fixed)

        logger.info(f"Remediated {path}: {len(changes)} change(s), {len(original)} -> {len(fixed)} chars")

        return RemediationOutcome(
            original_size=len(original),
            fixed_size=len(fixed),
            changes=changes
        )


def remediate(
    file_path: Union[str, Path],
    issues: Iterable[IssueLike],
    context: Optional[RemediationContext] = None
) -> RemediationOutcome:
    """Patch a stored document with the default routes."""
    return RemediationEngine().remediate(file_path, issues, context)
