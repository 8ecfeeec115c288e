import logging
import os
from typing import Iterable, List, Optional

from src.helpers import IdGenerator, id_space_size
from src.models import ShortLink
from src.repository import LinkStore

logger = logging.getLogger(__name__)

VALID_URL_PREFIX = "http"
# Unset means retry until an unused id turns up
MAX_ID_ATTEMPTS = (
    int(os.environ["MAX_ID_ATTEMPTS"]) if os.getenv("MAX_ID_ATTEMPTS") else None
)


class InvalidLink(Exception):
    def __init__(self, url: str):
        self.url = url
        self.message = "invalid link"
        super().__init__(self.message)


class RecordNotFound(Exception):
    def __init__(self, record_type: str, identifier: str):
        self.record_type = record_type
        self.identifier = identifier
        self.message = f"{record_type} not found for identifier: {identifier}"
        super().__init__(self.message)


class IdSpaceExhausted(Exception):
    def __init__(self, attempts: int, space_size: Optional[int] = None):
        self.attempts = attempts
        self.space_size = space_size
        if space_size is None:
            self.message = f"Could not allocate an unused id after {attempts} attempts"
        else:
            self.message = f"All {space_size} ids are in use"
        super().__init__(self.message)


class ShortenerService:
    def __init__(
        self,
        store: LinkStore,
        id_generator: IdGenerator,
        max_attempts: Optional[int] = MAX_ID_ATTEMPTS,
    ):
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"Max id attempts must be positive, got {max_attempts}")
        self.store = store
        self.id_generator = id_generator
        self.max_attempts = max_attempts

    def shorten(self, raw_url: str) -> ShortLink:
        """Validate a URL and store it under a freshly allocated id.

        Any value starting with the literal "http" is accepted, so
        "httpgarbage" passes. Candidates that collide with a stored id are
        discarded and a new one is drawn.
        """

        url = raw_url.strip()
        if not url.startswith(VALID_URL_PREFIX):
            logger.warning(f"Rejected invalid link: {raw_url!r}")
            raise InvalidLink(raw_url)

        space_size = id_space_size(self.id_generator.length)
        attempts = 0
        while True:
            # other callers may fill the space between passes
            if self.store.count() >= space_size:
                logger.error(
                    f"No unused id left for {url}, all {space_size} are taken"
                )
                raise IdSpaceExhausted(attempts, space_size)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                logger.error(
                    f"Gave up allocating an id for {url} after {attempts} attempts"
                )
                raise IdSpaceExhausted(attempts)
            attempts += 1

            link_id = self.id_generator.generate()
            if self.store.insert(link_id, url):
                break
            logger.warning(f"Id collision on {link_id}, retrying")

        logger.info(f"Adding {url} to store with id {link_id}")
        return ShortLink(id=link_id, target_url=url, visit_count=0)

    def resolve(self, link_id: str) -> str:
        target_url = self.store.resolve_and_increment(link_id)
        if target_url is None:
            logger.info(f"User visited {link_id}, but it is not a known link")
            raise RecordNotFound("Short link", link_id)

        logger.info(f"User visited {link_id}, redirecting to {target_url}")
        return target_url

    def list_all(self) -> List[ShortLink]:
        return self.store.list_all()

    def count_known(self) -> int:
        return self.store.count()

    def seed(self, urls: Iterable[str]) -> List[ShortLink]:
        links = [self.shorten(url) for url in urls]
        logger.info(f"Seeded store with {len(links)} URLs")
        return links
