"""JSON rendering of the aggregate.

Why JSON:
- Interoperability with other tools and shell pipelines (`| jq`).
- Stable key order so two runs can be diffed.
"""

from __future__ import annotations

import json

from core.domain.models import PersonInfo


def person_info_to_json(info: PersonInfo, *, indent: int | None = 2) -> str:
    """Serialize `PersonInfo` as UTF-8 friendly JSON with a stable layout."""

    payload = info.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=indent, sort_keys=True)
