"""
Literal placeholder substitution for term templates.

Tokens look like {{devedor}}. All keys are matched in a single pass over the
template, so replacement values are never scanned again: a value containing
another key's text stays literal and the order of the map does not matter.
Keys are escaped before being compiled so the vocabulary can grow without
turning keys into pattern syntax.
"""
from __future__ import annotations

import logging
import os
import re
from typing import Mapping, Optional

from .errors import SubstitutionGap

_LOG = logging.getLogger("uvicorn.error")

TOKEN_RE = re.compile(r"\{\{\s*[A-Za-z_][A-Za-z0-9_]*\s*\}\}")

POLICY_KEEP = "keep"
POLICY_EMPTY = "empty"
POLICY_FAIL = "fail"
POLICIES = (POLICY_KEEP, POLICY_EMPTY, POLICY_FAIL)

UNRESOLVED_TOKEN_POLICY = (os.environ.get("UNRESOLVED_TOKEN_POLICY", POLICY_KEEP).strip().lower() or POLICY_KEEP)


def substitute(template: str, mapping: Mapping[str, Optional[str]]) -> str:
    values = {key: ("" if value is None else str(value)) for key, value in mapping.items() if key}
    if not values:
        return template
    # Longest first so a key that prefixes another never wins the alternation.
    pattern = re.compile("|".join(re.escape(key) for key in sorted(values, key=len, reverse=True)))
    return pattern.sub(lambda m: values[m.group(0)], template)


def find_unresolved_tokens(template: str, mapping: Mapping[str, Optional[str]] | None = None) -> list[str]:
    """Distinct tokens of the template with no map entry, in order of first appearance."""
    known = mapping or {}
    seen: list[str] = []
    for match in TOKEN_RE.finditer(template):
        token = match.group(0)
        if token not in known and token not in seen:
            seen.append(token)
    return seen


def apply_unresolved_policy(
    template: str,
    mapping: Mapping[str, Optional[str]],
    policy: str | None = None,
) -> dict[str, Optional[str]]:
    """
    Decide what happens to template tokens the map does not cover. Only the
    template is inspected, never the submitted values. Returns the map to
    substitute with.

    keep  - leave them visible in the document (logged)
    empty - blank them out
    fail  - raise SubstitutionGap
    """
    policy = (policy or UNRESOLVED_TOKEN_POLICY).strip().lower()
    if policy not in POLICIES:
        raise ValueError(f"Unknown unresolved token policy: {policy}")
    resolved = dict(mapping)
    tokens = find_unresolved_tokens(template, mapping)
    if not tokens:
        return resolved
    if policy == POLICY_FAIL:
        raise SubstitutionGap(tokens)
    _LOG.warning("SUBSTITUTION_GAP policy=%s tokens=%s", policy, ",".join(tokens))
    if policy == POLICY_EMPTY:
        for token in tokens:
            resolved[token] = ""
    return resolved
