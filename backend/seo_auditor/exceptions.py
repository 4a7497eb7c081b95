"""
Auditor errors.

FetchFailure, DocumentNotFound and DocumentOutsideRoot reach callers;
ChecklistUnavailable is recovered inside the checklist store.
"""


class AuditorError(Exception):
    """Base class for auditor errors."""


class FetchFailure(AuditorError):
    """Primary page could not be retrieved."""
    
    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"Failed to fetch {url}: {message}")


class DocumentNotFound(AuditorError):
    """Remediation target does not exist."""
    
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class ChecklistUnavailable(AuditorError):
    """A checklist candidate file could not be read or parsed."""
    
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Checklist unavailable at {path}: {reason}")


class DocumentOutsideRoot(AuditorError):
    """Remediation target lies outside the allowed root directory."""
    
    def __init__(self, path: str, root: str):
        self.path = path
        self.root = root
        super().__init__(f"File is outside the remediation root {root}: {path}")
