# SPDX-License-Identifier: MIT

import uuid
from typing import Iterable, Optional, TypeAlias

EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def match_entity_id(prefix: str, ids: Iterable[EntityId]) -> Optional[EntityId]:
    """
    Resolve an id prefix typed by the user against the known ids.

    Returns the single id starting with the prefix, or None when the prefix
    matches nothing or more than one id.
    """
    matches = [entity_id for entity_id in ids if entity_id.startswith(prefix)]
    if len(matches) != 1:
        return None
    return matches[0]
