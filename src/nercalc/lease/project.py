# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project file payloads.

A saved project is the form state as JSON, URL-encoded into a ``data``
query parameter. Loading merges the stored keys shallowly onto the
defaults: unknown keys are ignored and missing keys keep their default.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, quote, unquote

from .parameters import DEFAULT_PARAMETERS, ParameterSet

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_STEM = "ner-project"


def encode_project(params: ParameterSet) -> str:
    """Serialise ``params`` to the URL-encoded JSON payload."""
    data = params.model_dump(mode="json", by_alias=True)
    return quote(json.dumps(data, ensure_ascii=False), safe="")


def decode_project(
    payload: str, defaults: Optional[ParameterSet] = None
) -> ParameterSet:
    """
    Rebuild a parameter set from a project payload.

    Args:
        payload: URL-encoded JSON object
        defaults: Values for keys the payload does not carry

    Returns:
        The merged ParameterSet. An unreadable payload is logged and the
        defaults are returned unchanged.
    """
    defaults = defaults or DEFAULT_PARAMETERS
    try:
        data = json.loads(unquote(payload))
    except ValueError as e:
        logger.warning(f"Failed to parse project data: {e}")
        return defaults

    if not isinstance(data, dict):
        logger.warning(
            f"Failed to parse project data: expected an object, got {type(data).__name__}"
        )
        return defaults

    return defaults.with_updates(**_known_keys(data))


def load_project_query(
    query: str, defaults: Optional[ParameterSet] = None
) -> ParameterSet:
    """
    Read the ``data`` parameter of a URL query string.

    ``parse_qs`` already percent-decodes the value once, so the JSON is
    parsed without a second unquote.
    """
    defaults = defaults or DEFAULT_PARAMETERS
    values = parse_qs(query.lstrip("?")).get("data")
    if not values:
        return defaults
    return decode_project(quote(values[0], safe=""), defaults)


def project_file_stem(tenant_label: str) -> str:
    """File name stem for exports: the trimmed tenant, or a generic default."""
    return tenant_label.strip() or DEFAULT_PROJECT_STEM


def _known_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    known = set(ParameterSet.model_fields)
    known.update(
        info.alias for info in ParameterSet.model_fields.values() if info.alias
    )
    dropped = sorted(k for k in data if k not in known)
    if dropped:
        logger.debug(f"Ignoring unknown project keys: {dropped}")
    return {k: v for k, v in data.items() if k in known}
