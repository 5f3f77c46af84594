# classifier.py
# SPDX-License-Identifier: MIT
"""
Classify license text by signature phrases.

Text is normalized (lowercased, line breaks turned into spaces, whitespace
runs collapsed) and then tested against :data:`SIGNATURE_RULES` from top to
bottom. The first rule whose phrases all occur wins. There is no scoring and
no approximate matching: a license either contains its stable boilerplate
or it is reported as unrecognized.

Order matters. Several licenses quote each other (the LGPL names the GPL,
BSD clauses appear in other permissive texts), so a rule only needs to be
unique among the rules that come after it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import UnrecognizedLicenseError
from .identifiers import (
    LICENSE_AGPL_30,
    LICENSE_APACHE_20,
    LICENSE_CDDL_10,
    LICENSE_EPL_10,
    LICENSE_FREE_BSD,
    LICENSE_GPL_20,
    LICENSE_GPL_30,
    LICENSE_ISC,
    LICENSE_LGPL_21,
    LICENSE_LGPL_30,
    LICENSE_MIT,
    LICENSE_MPL_20,
    LICENSE_NEW_BSD,
    LICENSE_UNLICENSE,
)
from .log import get_logger

__all__ = [
    "SignatureRule",
    "SIGNATURE_RULES",
    "normalize_text",
    "match_rule",
    "classify",
]

log = get_logger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\n")
_SPACE_RE = re.compile(r"\s{2,}")


@dataclass(frozen=True, slots=True)
class SignatureRule:
    """
    One entry of the classification cascade.

    Attributes:
        license_id (str): Identifier returned when the rule matches.
        all_of (tuple[str, ...]): Normalized phrases that must all occur.
        any_of (tuple[str, ...]): Normalized phrases of which at least one
            must occur; ignored when empty.
    """

    license_id: str
    all_of: tuple[str, ...] = ()
    any_of: tuple[str, ...] = ()

    def matches(self, normalized: str) -> bool:
        if not all(phrase in normalized for phrase in self.all_of):
            return False
        if self.any_of:
            return any(phrase in normalized for phrase in self.any_of)
        return True


_BSD_REDISTRIBUTION = "redistribution and use in source and binary forms"

SIGNATURE_RULES: tuple[SignatureRule, ...] = (
    SignatureRule(
        LICENSE_MIT,
        all_of=("permission is hereby granted, free of charge, to any person obtaining a copy of this software",),
    ),
    SignatureRule(
        LICENSE_ISC,
        all_of=("permission to use, copy, modify, and/or distribute this software for any",),
    ),
    SignatureRule(
        LICENSE_APACHE_20,
        any_of=(
            "apache license version 2.0, january 2004",
            "http://www.apache.org/licenses/license-2.0",
            "https://www.apache.org/licenses/license-2.0",
        ),
    ),
    SignatureRule(LICENSE_GPL_20, all_of=("gnu general public license version 2, june 1991",)),
    SignatureRule(LICENSE_GPL_30, all_of=("gnu general public license version 3, 29 june 2007",)),
    SignatureRule(LICENSE_LGPL_21, all_of=("gnu lesser general public license version 2.1, february 1999",)),
    SignatureRule(LICENSE_LGPL_30, all_of=("gnu lesser general public license version 3, 29 june 2007",)),
    SignatureRule(LICENSE_AGPL_30, all_of=("gnu affero general public license version 3, 19 november 2007",)),
    SignatureRule(LICENSE_MPL_20, all_of=("mozilla public license", "version 2.0")),
    # 3-clause BSD names the copyright holder in its non-endorsement clause;
    # without that clause the text is taken as 2-clause (FreeBSD).
    SignatureRule(LICENSE_NEW_BSD, all_of=(_BSD_REDISTRIBUTION, "neither the name of")),
    SignatureRule(LICENSE_FREE_BSD, all_of=(_BSD_REDISTRIBUTION,)),
    SignatureRule(LICENSE_CDDL_10, all_of=("common development and distribution license (cddl) version 1.0",)),
    SignatureRule(LICENSE_EPL_10, all_of=("eclipse public license - v 1.0",)),
    SignatureRule(
        LICENSE_UNLICENSE,
        all_of=("this is free and unencumbered software released into the public domain",),
    ),
)


def normalize_text(text: str) -> str:
    """Normalize license text for phrase matching.

    Lowercases, replaces every CRLF or LF with a space, then collapses any
    run of two or more whitespace characters into a single space. Line
    breaks carry no legal meaning, so wrapped and unwrapped copies of a
    license normalize to the same string.
    """
    comp = text.lower()
    comp = _NEWLINE_RE.sub(" ", comp)
    return _SPACE_RE.sub(" ", comp)


def match_rule(text: str) -> SignatureRule | None:
    """Return the first rule matching ``text``, or None."""
    normalized = normalize_text(text)
    for rule in SIGNATURE_RULES:
        if rule.matches(normalized):
            return rule
    return None


def classify(text: str) -> str:
    """Return the license identifier for ``text``.

    Raises:
        UnrecognizedLicenseError: No signature rule matched.
    """
    rule = match_rule(text)
    if rule is None:
        raise UnrecognizedLicenseError()
    log.debug("License text matched %s", rule.license_id)
    return rule.license_id
