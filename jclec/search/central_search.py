"""
Maven Central search client.

Looks up artifacts that contain a class with a given fully-qualified name
using the Solr-based search API at search.maven.org.
"""

import logging
from typing import List, Optional

import requests
from pydantic import BaseModel, ValidationError


# Partial schema of the /solrsearch/select response (wt=json).
# Only the fields used here are declared; everything else is ignored.
class SearchDoc(BaseModel):
    """One matching artifact version."""
    id: Optional[str] = None
    g: Optional[str] = None
    a: Optional[str] = None
    v: Optional[str] = None
    p: Optional[str] = None


class SearchResultPage(BaseModel):
    numFound: int = 0
    start: int = 0
    docs: List[SearchDoc] = []


class SearchResponse(BaseModel):
    response: SearchResultPage


class CentralSearchClient:
    """Client for the Maven Central full-text class search."""

    def __init__(
            self,
            base_url: str = "https://search.maven.org/solrsearch/select",
            rows: int = 20,
            timeout: int = 30,
            user_agent: str = "Mozilla/5.0",
            session: Optional[requests.Session] = None,
            logger: Optional[logging.Logger] = None
    ):
        self.base_url = base_url
        self.rows = rows
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None,
                      logger: Optional[logging.Logger] = None) -> "CentralSearchClient":
        """Build a client from SearchSettings."""
        return cls(
            base_url=settings.base_url,
            rows=settings.rows,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            session=session,
            logger=logger
        )

    def search_for_class(self, class_name: str) -> List[str]:
        """
        Find artifacts containing a fully-qualified class name.

        Args:
            class_name: Class to search for, e.g. org.example.Foo

        Returns:
            Artifact ids (group:artifact:version) in response order; empty on
            any network or response error
        """
        params = {
            "q": f'fc:"{class_name}"',
            "rows": self.rows,
            "wt": "json"
        }

        try:
            response = self.session.get(
                self.base_url,
                params=params,
                headers=self.headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"Error searching for class {class_name}: {e}")
            return []

        if response.status_code != 200:
            self.logger.error(f"Search API returned {response.status_code} for {class_name}")
            return []

        return self.parse_response(response.text, class_name)

    def parse_response(self, body: str, class_name: str = "") -> List[str]:
        """Extract artifact ids from a search response body."""
        if not body or not body.strip():
            self.logger.warning(f"Empty search response for {class_name}")
            return []

        try:
            parsed = SearchResponse.model_validate_json(body)
        except ValidationError as e:
            self.logger.error(f"Unexpected search response for {class_name}: {e.error_count()} schema error(s)")
            self.logger.debug(str(e))
            return []

        ids = [doc.id for doc in parsed.response.docs if doc.id]
        skipped = len(parsed.response.docs) - len(ids)
        if skipped:
            self.logger.warning(f"Search for {class_name}: skipped {skipped} result(s) without an id")
        self.logger.debug(f"Search for {class_name}: {len(ids)} of {parsed.response.numFound} hits")
        return ids
