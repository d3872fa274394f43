"""Lexical path helpers for playlist URIs.

Segment and init-segment URIs are written relative to the directory that
holds the chunklist. Everything here is purely lexical (POSIX separators,
no filesystem access, no dependency on the working directory) so a given
chunklist state always renders to the same text.
"""

from __future__ import annotations

import posixpath


def _parts(p: str) -> list[str]:
    return [c for c in posixpath.normpath(p).split("/") if c not in ("", ".")]


def relative_to(target: str, base_dir: str) -> str | None:
    """Return `target` relative to `base_dir`, or None if they cannot be related.

    Paths cannot be related when exactly one of them is absolute, or when
    `base_dir` climbs above a point `target` does not share (``../a`` vs ``b``).
    """
    if posixpath.isabs(target) != posixpath.isabs(base_dir):
        return None

    base = _parts(base_dir)
    tgt = _parts(target)

    common = 0
    for b, t in zip(base, tgt):
        if b != t:
            break
        common += 1

    if ".." in base[common:]:
        return None

    rel = [".."] * (len(base) - common) + tgt[common:]
    return "/".join(rel) or "."


def chunklist_dir(chunklist_path: str) -> str:
    """Directory containing the chunklist ('.' for a bare file name)."""
    return posixpath.dirname(chunklist_path) or "."


def playlist_uri(target: str, chunklist_path: str) -> str:
    """URI for `target` as written inside the chunklist at `chunklist_path`.

    Falls back to `target` unchanged when no relative form exists.
    """
    if not target:
        return target
    rel = relative_to(target, chunklist_dir(chunklist_path))
    return target if rel is None else rel
