import logging
import threading
from typing import Dict, List, Optional

from src.models import ShortLink

logger = logging.getLogger(__name__)


class LinkStore:
    """In-memory id -> ShortLink mapping.

    Every operation runs under a single lock, so inserts and counter updates
    are indivisible to any other caller. Contents are lost on process exit.
    """

    def __init__(self):
        self._links: Dict[str, ShortLink] = {}
        self._lock = threading.Lock()

    def insert(self, link_id: str, target_url: str) -> bool:
        with self._lock:
            if link_id in self._links:
                return False
            self._links[link_id] = ShortLink(id=link_id, target_url=target_url)
        logger.debug(f"Stored link {link_id} -> {target_url}")
        return True

    def resolve_and_increment(self, link_id: str) -> Optional[str]:
        with self._lock:
            link = self._links.get(link_id)
            if link is None:
                return None
            link.visit_count += 1
            target_url, visit_count = link.target_url, link.visit_count
        logger.debug(f"Visit count of {link_id} is now {visit_count}")
        return target_url

    def list_all(self) -> List[ShortLink]:
        with self._lock:
            return [link.model_copy() for link in self._links.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._links)
