"""Entry filtering and wildcard name matching."""

from __future__ import annotations

from fs_gear._types import EntryInfo, FilterCriteria


def matches_filter(entry: EntryInfo, criteria: FilterCriteria) -> bool:
    """Check whether an entry satisfies every clause of ``criteria``.

    Extension restrictions only apply to files; size bounds are inclusive.
    """
    if entry.is_file and not criteria.include_files:
        return False
    if entry.is_directory and not criteria.include_directories:
        return False

    if criteria.extensions is not None and entry.is_file:
        if entry.extension is None:
            return False
        if entry.extension.lower() not in criteria.extensions:
            return False

    if criteria.min_size is not None and entry.size < criteria.min_size:
        return False
    if criteria.max_size is not None and entry.size > criteria.max_size:
        return False

    return True


def matches_pattern(name: str, pattern: str) -> bool:
    """Match a name against a wildcard pattern, ignoring case.

    ``*`` matches any run of characters (including none) and ``?`` matches
    exactly one character. The whole name has to be consumed.

    Example:
        >>> matches_pattern("Report.TXT", "*.txt")
        True
        >>> matches_pattern("te", "t?st")
        False
    """
    if pattern == "*":
        return True
    if "*" not in pattern and "?" not in pattern:
        return name.lower() == pattern.lower()
    return _wildcard_match(name.lower(), pattern.lower())


def _wildcard_match(text: str, pattern: str) -> bool:
    # Runs of '*' behave like a single one.
    collapsed: list[str] = []
    for ch in pattern:
        if ch == "*" and collapsed and collapsed[-1] == "*":
            continue
        collapsed.append(ch)

    # row[j]: text[:i] matches pattern[:j], one text position at a time.
    row = [False] * (len(collapsed) + 1)
    row[0] = True
    for j, ch in enumerate(collapsed, 1):
        row[j] = row[j - 1] and ch == "*"

    for t in text:
        prev_diag = row[0]
        row[0] = False
        for j, ch in enumerate(collapsed, 1):
            above = row[j]
            if ch == "*":
                row[j] = row[j - 1] or above
            elif ch == "?" or ch == t:
                row[j] = prev_diag
            else:
                row[j] = False
            prev_diag = above

    return row[-1]
