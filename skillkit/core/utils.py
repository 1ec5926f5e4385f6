"""File I/O and filesystem placement helpers."""

import json
import os
import shutil
from typing import Any, Iterable


def read_json(path: str) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_file(path: str, content: str) -> None:
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def display_path(path: str, base: str) -> str:
    """Path relative to base when it lives underneath it, else unchanged."""
    try:
        rel = os.path.relpath(path, base)
    except ValueError:
        return path
    return path if rel.startswith('..') else rel


def remove_path(path: str) -> None:
    """Remove whatever sits at path: symlink, file or directory tree."""
    if os.path.islink(path) or os.path.isfile(path):
        os.unlink(path)
    elif os.path.isdir(path):
        shutil.rmtree(path)


def link_path(src: str, dest: str) -> None:
    """Point dest at src with a relative symlink, replacing any existing entry."""
    os.makedirs(os.path.dirname(dest) or '.', exist_ok=True)
    remove_path(dest)
    target = os.path.relpath(os.path.abspath(src), os.path.dirname(os.path.abspath(dest)))
    os.symlink(target, dest)


def copy_file(src: str, dest: str) -> None:
    os.makedirs(os.path.dirname(dest) or '.', exist_ok=True)
    if os.path.islink(dest) or os.path.isdir(dest):
        remove_path(dest)
    shutil.copyfile(src, dest)


def copy_unit_tree(src: str, dest: str, skip: Iterable[str] = ()) -> None:
    """Copy a unit directory recursively over dest, leaving out files named in skip."""
    remove_path(dest)
    shutil.copytree(src, dest, ignore=shutil.ignore_patterns(*skip))


def entry_location(path: str) -> str:
    """Real location of the entry at path, without following a symlink in its last part."""
    parent = os.path.realpath(os.path.dirname(os.path.abspath(path)) or '.')
    return os.path.join(parent, os.path.basename(os.path.normpath(path)))


def paths_overlap(a: str, b: str) -> bool:
    """True when a and b are the same path or one contains the other."""
    a, b = os.path.normpath(a), os.path.normpath(b)
    try:
        common = os.path.commonpath([a, b])
    except ValueError:
        return False
    return common in (a, b)
