#===============================================================================
#  Browser_Picker | domain_match.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Domain list matching: decides whether the picker should be shown for a URL.
#  The list lives in ./domains.txt, one pattern per line:
#      github.com        -> exact host
#      *.google.com      -> any subdomain of google.com (not google.com itself)
#  An empty or missing list means "show the picker for everything".
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List
from urllib.parse import urlsplit

LOGGER = logging.getLogger("picker.domain_match")

# Schemes that cannot be valid without a host
_HOST_SCHEMES = ("http", "https", "ftp", "ws", "wss")


def host_matches_pattern(hostname: str, pattern: str) -> bool:
    """Check if a hostname matches an exact or `*.suffix` wildcard pattern."""
    h = hostname.lower()
    p = pattern.lower()

    if p.startswith("*."):
        suffix = p[1:]  # ".example.com"
        # subdomains only, never the bare domain
        return h.endswith(suffix) and len(h) > len(suffix)

    return h == p


def parse_domains(content: str) -> List[str]:
    """Parse a domains file. Ignores blank lines and lines starting with #."""
    lines = [ln.strip() for ln in content.splitlines()]
    return [ln for ln in lines if ln and not ln.startswith("#")]


def read_domain_list(domains_path: Path) -> List[str]:
    """Read the domains file; an unreadable file yields an empty list."""
    try:
        content = domains_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.warning("Could not read domain list %s: %s", domains_path, e)
        return []
    return parse_domains(content)


def should_activate(url: str, patterns: Iterable[str]) -> bool:
    """Return True when the picker should be shown for `url`.

    Fails open: no patterns, or a URL that cannot be parsed, shows the picker.
    """
    patterns = list(patterns)
    if not patterns:
        return True

    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname or ""
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        return True

    # Not an absolute URL; let the user decide
    if not parts.scheme:
        return True
    if parts.scheme in _HOST_SCHEMES and not hostname:
        return True
    if any(ch.isspace() for ch in parts.netloc):
        return True

    return any(host_matches_pattern(hostname, p) for p in patterns)


def is_url_matching_domain_list(url: str, domains_path: Path) -> bool:
    return should_activate(url, read_domain_list(domains_path))
