"""Event repository talking to a Supabase (PostgREST) events table over HTTP."""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..models.event import Event
from .base import EventRepository, RepositoryError
from .mapper import event_to_row, row_to_event

logger = logging.getLogger(__name__)


class SupabaseEventRepository(EventRepository):
    """Client for the events table exposed by a Supabase project."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = 'events',
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip('/')
        self.table = table
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            'apikey': api_key,
            'Authorization': f"Bearer {api_key}",
            'Accept': 'application/json',
        }

    @property
    def table_url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _request(self, method: str, action: str, **kwargs) -> Any:
        """
        Send a request to the table endpoint and decode the JSON body.

        Args:
            method: HTTP method
            action: Description used in error messages (e.g. 'fetch events')

        Raises:
            RepositoryError: If the request fails or the body is not JSON
        """
        headers = dict(self.headers)
        headers.update(kwargs.pop('headers', {}))
        try:
            response = self.session.request(
                method,
                self.table_url,
                headers=headers,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to {action}: {e}")
            raise RepositoryError(f"Failed to {action}: {e}") from e
        except ValueError as e:
            raise RepositoryError(f"Failed to {action}: invalid JSON response") from e

    def list_events(self) -> List[Event]:
        rows = self._request(
            'GET',
            'fetch events',
            params={'select': '*', 'order': 'event_start.asc'}
        )
        if not isinstance(rows, list):
            raise RepositoryError("Failed to fetch events: response must be a list of events")
        return [row_to_event(row) for row in rows]

    def get_event_by_id(self, event_id: str) -> Optional[Event]:
        rows = self._request(
            'GET',
            f"fetch event {event_id}",
            params={'select': '*', 'id': f"eq.{event_id}", 'limit': 1}
        )
        if not rows:
            return None
        return row_to_event(rows[0])

    def create_event(self, event: Event) -> Event:
        row: Dict[str, Any] = event_to_row(event)
        rows = self._request(
            'POST',
            'create event',
            json=row,
            params={'select': '*'},
            headers={'Prefer': 'return=representation', 'Content-Type': 'application/json'}
        )
        if not rows:
            raise RepositoryError("Failed to create event: no row returned")
        inserted = rows[0] if isinstance(rows, list) else rows
        logger.info(f"Created event {inserted.get('id')}: {inserted.get('title')}")
        return row_to_event(inserted)
