# test_classifier.py
# SPDX-License-Identifier: MIT
from pathlib import Path

import pytest

from licenseguess.core.classifier import SIGNATURE_RULES, classify, match_rule, normalize_text
from licenseguess.core.errors import ERR_UNRECOGNIZED_LICENSE, UnrecognizedLicenseError
from licenseguess.core.identifiers import KNOWN_LICENSES

FIXTURES = Path(__file__).parent / "fixtures" / "licenses"


def _fixture(license_id: str) -> str:
    return (FIXTURES / license_id).read_text(encoding="utf-8")


@pytest.mark.parametrize("license_id", KNOWN_LICENSES)
def test_reference_texts_classify_to_their_identifier(license_id):
    assert classify(_fixture(license_id)) == license_id


@pytest.mark.parametrize("license_id", KNOWN_LICENSES)
def test_crlf_and_blank_lines_do_not_change_result(license_id):
    text = _fixture(license_id)
    padded = "\r\n\r\n" + text.replace("\n", "\r\n\r\n\r\n") + "\n\n\n"

    assert classify(padded) == classify(text)


@pytest.mark.parametrize("license_id", KNOWN_LICENSES)
def test_uppercase_text_does_not_change_result(license_id):
    text = _fixture(license_id)

    assert classify(text.upper()) == classify(text)


def test_unrecognized_text_raises():
    with pytest.raises(UnrecognizedLicenseError) as excinfo:
        classify("No license data")
    assert str(excinfo.value) == ERR_UNRECOGNIZED_LICENSE


def test_empty_text_is_unrecognized():
    assert match_rule("") is None
    with pytest.raises(UnrecognizedLicenseError):
        classify("")


def test_mit_phrase_alone_is_enough():
    text = "Permission is hereby granted, free of charge, to any person obtaining a copy of this software..."
    assert classify(text) == "MIT"


def test_bsd_branch_on_non_endorsement_clause():
    head = "Redistribution and use in source and binary forms, with or without modification."
    assert classify(head + " Neither the name of the project may be used.") == "NewBSD"
    assert classify(head) == "FreeBSD"


def test_abbreviated_apache_url():
    assert classify("http://www.apache.org/licenses/LICENSE-2.0") == "Apache-2.0"
    assert classify("See https://www.apache.org/licenses/LICENSE-2.0 for details") == "Apache-2.0"


def test_mpl_requires_both_phrases_anywhere():
    assert classify("Version 2.0 of the Mozilla Public License") == "MPL-2.0"
    with pytest.raises(UnrecognizedLicenseError):
        classify("Mozilla Public License, version 1.1")


def test_first_matching_rule_wins():
    # MIT text that also embeds a BSD clause is still MIT: MIT is checked first.
    text = _fixture("MIT") + "\nRedistribution and use in source and binary forms are permitted."
    assert classify(text) == "MIT"
    rule = match_rule(text)
    assert rule is SIGNATURE_RULES[0]


def test_phrase_split_across_wrapped_lines():
    text = "this is free and\n     unencumbered software released\r\ninto the public domain"
    assert classify(text) == "Unlicense"


def test_normalize_text_collapses_whitespace():
    assert normalize_text("A\r\nB\n\n  C") == "a b c"
    assert normalize_text("Tab\tkept") == "tab\tkept"


def test_rule_table_covers_every_known_identifier():
    assert {rule.license_id for rule in SIGNATURE_RULES} == set(KNOWN_LICENSES)


def test_rules_are_checked_in_declared_order():
    ids = [rule.license_id for rule in SIGNATURE_RULES]
    assert ids.index("MIT") < ids.index("ISC") < ids.index("Apache-2.0")
    assert ids.index("NewBSD") + 1 == ids.index("FreeBSD")
    assert ids[-1] == "Unlicense"
