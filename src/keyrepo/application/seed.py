"""Application service: load a fixed seed sequence into a repository.

Seed data gets no special treatment: every entity goes through the
repository's ``add`` and the same uniqueness rule applies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from keyrepo.domain.repository.keyed_repository import KeyedRepository

logger = logging.getLogger(__name__)


class SeedHandler:

    def __init__(self, repo: KeyedRepository) -> None:
        self._repo = repo

    def handle(self, entities: Iterable) -> int:
        count = 0
        for entity in entities:
            self._repo.add(entity)
            count += 1
        logger.debug("Seeded %d %s record(s)", count, self._repo.entity_name)
        return count
