"""
Signable payload resolution.

Requests with a JSON body sign the serialized body. Bodiless requests sign
a synthetic ``{"id": ...}`` document naming the resource taken from the
path, so a signature issued for one resource cannot be replayed against
another.
"""

import json
from collections import namedtuple
from typing import Any, Mapping, Optional
from urllib.parse import quote

from .constants import ACTION_SEGMENTS, SIG_PAYLOAD_PARAM

EMPTY_PAYLOAD = "{}"

ResolvedPayload = namedtuple(
    'ResolvedPayload', ['payload_to_send', 'payload_to_sign', 'resource_id']
)


def serialize(data: Any) -> str:
    """Serialize ``data`` to compact JSON."""
    return json.dumps(data, separators=(',', ':'))


def extract_resource_id(path: str) -> Optional[str]:
    """
    Derive the targeted resource id from a request path.

    ``/v1/key-cards/abc/suspend`` yields ``abc``, ``/v1/key-cards/abc``
    yields ``abc``. Paths with fewer than two segments yield None.
    """
    segments = [s for s in path.split('?', 1)[0].split('/') if s]
    if len(segments) < 2:
        return None

    if segments[-1] in ACTION_SEGMENTS:
        return segments[-2]
    return segments[-1]


def resolve_payload(method: str, path: str,
                    body: Optional[Mapping[str, Any]] = None) -> ResolvedPayload:
    """
    Decide what is sent and what is signed for a request.

    Args:
        method: HTTP method
        path: URL path (relative to base_url)
        body: JSON body, if any

    Returns:
        ResolvedPayload(payload_to_send, payload_to_sign, resource_id)
    """
    if method.upper() != 'GET' and body:
        serialized = serialize(body)
        return ResolvedPayload(serialized, serialized, None)

    resource_id = extract_resource_id(path)
    if resource_id is None:
        return ResolvedPayload("", EMPTY_PAYLOAD, None)

    return ResolvedPayload("", serialize({"id": resource_id}), resource_id)


def sig_payload_param(payload_to_sign: str) -> str:
    """Build the ``sig_payload`` query fragment for a signed payload."""
    return f"{SIG_PAYLOAD_PARAM}={quote(payload_to_sign, safe='')}"
