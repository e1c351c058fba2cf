"""
Repository store errors.

Each error carries a stable ``code`` and a human readable ``reason`` that the
API returns verbatim to clients.
"""


class RepositoryStoreError(Exception):
    """Base class for expected, recoverable store failures"""

    code: str = "000"
    reason: str = "Repository store error."

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.reason} {detail}".strip())

    def to_dict(self) -> dict:
        return {"code": self.code, "reason": self.reason}


class RepositoryNotFoundError(RepositoryStoreError):
    """No record with the requested id"""

    code = "001"
    reason = "Repository not found."


class DuplicateURLError(RepositoryStoreError):
    """Another record already uses the url"""

    code = "002"
    reason = "This url is already included before."
