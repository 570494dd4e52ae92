import fnmatch
from pathlib import Path
from typing import Sequence


def split_patterns(patterns: Sequence[str]) -> tuple[list[str], list[str]]:
    includes = [p for p in patterns if not p.startswith("!")]
    excludes = [p[1:] for p in patterns if p.startswith("!")]
    return includes, excludes


# Expand include patterns below root and drop anything matching a "!" pattern.
# Results keep pattern order, files within one pattern are sorted so repeated
# loads produce the same target contents.
def glob_with_exclusions(root: Path, patterns: Sequence[str]) -> list[Path]:
    includes, excludes = split_patterns(patterns)
    matched: list[Path] = []
    seen: set[Path] = set()
    for pattern in includes:
        for src in sorted(root.glob(pattern)):
            rel_path = src.relative_to(root).as_posix()
            if src in seen:
                continue
            if any(fnmatch.fnmatch(rel_path, exclude) for exclude in excludes):
                continue
            seen.add(src)
            matched.append(src)
    return matched
