"""Discover: locate skill.json descriptors under the skills root.

A directory holding a descriptor is a unit. Its subtree is not searched any
further, so units never nest.
"""

import os
from typing import Optional

from ..core.errors import UsageError, InstallError
from ..core.types import DESCRIPTOR_FILENAME, SkillUnit


def _walk_units(top: str, descriptor_filename: str) -> list[str]:
    """Return unit directories under top, stopping at the first descriptor per branch."""
    unit_dirs = []
    for dirpath, dirnames, filenames in os.walk(top):
        if descriptor_filename in filenames:
            unit_dirs.append(dirpath)
            dirnames[:] = []
            continue
        dirnames.sort()
    return unit_dirs


def resolve_explicit_path(single_path: str, root: str) -> str:
    """Resolve a user-supplied path: absolute as-is, else cwd, else the repo holding root."""
    if os.path.isabs(single_path):
        return single_path
    from_cwd = os.path.abspath(single_path)
    if os.path.exists(from_cwd):
        return from_cwd
    from_repo = os.path.join(os.path.dirname(os.path.abspath(root)), single_path)
    if os.path.exists(from_repo):
        return os.path.normpath(from_repo)
    return from_cwd


def find_descriptor_paths(root: str, single_path: Optional[str] = None,
                          descriptor_filename: str = DESCRIPTOR_FILENAME) -> list[str]:
    """Return the descriptors to process, sorted by full path.

    With single_path, the result is exactly that path (it must exist).
    Without it, walk root. A missing root yields an empty list.
    """
    if single_path:
        resolved = resolve_explicit_path(single_path, root)
        if not os.path.exists(resolved):
            raise UsageError(f"Not found: {resolved}")
        return [resolved]

    if not os.path.isdir(root):
        return []

    paths = [os.path.join(d, descriptor_filename) for d in _walk_units(root, descriptor_filename)]
    return sorted(paths)


def find_units(source: str, descriptor_filename: str = DESCRIPTOR_FILENAME) -> list[SkillUnit]:
    """Collect the units under source, sorted by directory."""
    if not os.path.exists(source):
        raise InstallError(f"Source not found: {source}")

    return [
        SkillUnit(dir=unit_dir, slug=os.path.basename(os.path.normpath(unit_dir)))
        for unit_dir in sorted(_walk_units(source, descriptor_filename))
    ]
