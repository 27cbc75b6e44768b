"""Content item creators."""

import logging
from typing import Dict, Type

from cinema_manager.errors import UnknownVariantError
from cinema_manager.factories.base import ContentCreator

logger = logging.getLogger(__name__)


class StandardCreator(ContentCreator):
    """Regular 2D screenings."""

    @property
    def kind(self) -> str:
        return "Standard"


class PremiumCreator(ContentCreator):
    """IMAX, 4DX and other premium formats."""

    @property
    def kind(self) -> str:
        return "PremiumFormat"


# New kinds: subclass ContentCreator and register here
CONTENT_CREATORS: Dict[str, Type[ContentCreator]] = {
    "Standard": StandardCreator,
    "PremiumFormat": PremiumCreator,
}


def get_content_creator(kind: str) -> ContentCreator:
    """Look up the creator registered for a content kind."""
    creator_cls = CONTENT_CREATORS.get(kind)
    if creator_cls is None:
        logger.warning(f"No content creator for kind: {kind}")
        raise UnknownVariantError("content kind", kind, CONTENT_CREATORS)
    return creator_cls()
