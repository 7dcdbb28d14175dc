"""
Job Error Classifier for solr_post.

Turns upload failures into a short operator hint, so a wall of failed
uploads points at the likely misconfiguration instead of 500 stack traces.
"""

import httpx

from solr_post.core.exceptions import UploadError


class JobErrorClassifier:
    """Classifies upload errors into human-readable hints."""

    TRANSPORT_HINT = "Is the Solr server running and the collection available?"
    NOT_FOUND_HINT = "Is the collection correct?"
    AUTH_HINT = "Check the basic auth credentials."
    SERVER_HINT = "Solr failed to process the document; check the Solr logs."
    CLIENT_HINT = "Solr rejected the request; check the content type and handler."

    def classify(self, error: UploadError) -> str:
        """
        Args:
            error: The UploadError raised for a single file

        Returns:
            Hint describing the most likely cause
        """
        status = error.status_code

        if status is None:
            if isinstance(error.__cause__, httpx.TimeoutException):
                return f"Request timed out. {self.TRANSPORT_HINT}"
            return self.TRANSPORT_HINT

        if status == 404:
            return self.NOT_FOUND_HINT
        if status in (401, 403):
            return self.AUTH_HINT
        if status >= 500:
            return self.SERVER_HINT
        return self.CLIENT_HINT

    def is_systemic(self, error: UploadError) -> bool:
        """True for failures that will most likely hit every other file as well."""
        return error.status_code is None or error.status_code in (401, 403, 404)
