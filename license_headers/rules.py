"""License family definitions and the approved list.

This is static configuration data: the families the check recognises,
the substrings that identify them, and which of them may appear in the
codebase.
"""

from __future__ import annotations

from license_headers.models.rules import LicenseFamily, RuleSet

APACHE = "Apache"
MIT = "The MIT License"
MODIFIED_BSD = "Modified BSD License"
GENERATED = "Generated"
ORIGINAL_BSD = "Original BSD License (with advertising clause)"

APPROVED_LICENSES = frozenset({APACHE, MIT, MODIFIED_BSD, GENERATED})

LICENSE_FAMILIES: tuple[LicenseFamily, ...] = (
    # BSD 4-clause; defined so it can be reported, never approved
    LicenseFamily(
        category="BSD4 ",
        name=ORIGINAL_BSD,
        patterns=("All advertising materials",),
    ),
    LicenseFamily(
        category="BSD  ",
        name=MODIFIED_BSD,
        patterns=(
            # brics automaton
            "Copyright (c) 2001-2009 Anders Moeller",
            # snowball
            "Copyright (c) 2001, Dr Martin Porter",
            # UMASS kstem
            "THIS SOFTWARE IS PROVIDED BY UNIVERSITY OF MASSACHUSETTS AND OTHER CONTRIBUTORS",
            # Egothor
            "Egothor Software License version 1.00",
            # JaSpell
            "Copyright (c) 2005 Bruno Martins",
            # d3.js
            "THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS",
            # highlight.js
            "THIS SOFTWARE IS PROVIDED BY THE REGENTS AND CONTRIBUTORS",
        ),
    ),
    LicenseFamily(
        category="MIT  ",
        name=MIT,
        patterns=(
            # ICU license
            "Permission is hereby granted, free of charge, to any person obtaining a copy",
        ),
    ),
    LicenseFamily(
        category="AL   ",
        name=APACHE,
        patterns=(
            "Licensed to Elasticsearch under one or more contributor",
            "Licensed to the Apache Software Foundation (ASF) under",
            # old-school header still found on some files
            'Licensed under the Apache License, Version 2.0 (the "License")',
        ),
    ),
    LicenseFamily(
        category="GEN  ",
        name=GENERATED,
        patterns=(
            # svg files generated by gnuplot
            "Produced by GNUPLOT",
            # snowball stemmers
            "This file was generated automatically by the Snowball to Java compiler",
            # uima tests generated by JCasGen
            "First created by JCasGen",
            # antlr parsers
            "ANTLR GENERATED CODE",
        ),
    ),
)

# Built-in matchers, consulted after the configured families
DEFAULT_MATCHERS: tuple[LicenseFamily, ...] = (
    LicenseFamily(
        category="AL   ",
        name=APACHE,
        patterns=(
            "http://www.apache.org/licenses/LICENSE-2.0",
            "https://www.apache.org/licenses/LICENSE-2.0",
        ),
    ),
    LicenseFamily(
        category="MIT  ",
        name=MIT,
        patterns=(
            'THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND',
        ),
    ),
    LicenseFamily(
        category="GPL  ",
        name="GNU General Public License",
        patterns=(
            "GNU General Public License",
            "http://www.gnu.org/licenses/gpl",
        ),
    ),
    LicenseFamily(
        category="CDDL1",
        name="COMMON DEVELOPMENT AND DISTRIBUTION LICENSE Version 1.0",
        patterns=("COMMON DEVELOPMENT AND DISTRIBUTION LICENSE (CDDL) Version 1.0",),
    ),
    LicenseFamily(
        category="W3C  ",
        name="W3C Software Copyright",
        patterns=("http://www.w3.org/Consortium/Legal/",),
    ),
    LicenseFamily(
        category="GEN  ",
        name=GENERATED,
        patterns=(
            "Generated By:JavaCC: Do not edit this line.",
            "generated by Apache Thrift",
            "Autogenerated by Thrift Compiler",
            "Generated by the protocol buffer compiler.  DO NOT EDIT!",
        ),
    ),
)


def get_default_rules(add_default_matchers: bool = True) -> RuleSet:
    """Get the rule set used by the license header check.

    Args:
        add_default_matchers: Whether the auditor should also consult its
            built-in matchers after the configured families.

    Returns:
        RuleSet with the configured families and approved display names.
    """
    return RuleSet(
        families=LICENSE_FAMILIES,
        approved=APPROVED_LICENSES,
        add_default_matchers=add_default_matchers,
    )


def get_default_matchers() -> tuple[LicenseFamily, ...]:
    """Get the built-in matchers consulted after the configured families."""
    return DEFAULT_MATCHERS
