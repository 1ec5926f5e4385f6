"""Shared pytest fixtures for skillkit tests."""

import json
import os

import pytest

from skillkit.core.types import ToolkitConfig
from skillkit.core.logger import SkillLogger


SAMPLE_DESCRIPTOR = {
    "id": "ns.sample",
    "title": "Sample",
    "version": "0.1.0",
    "description": "desc",
    "triggers": ["t1"],
    "guarantees": ["g1"],
    "non_goals": ["n1"],
}

FULL_DESCRIPTOR = {
    "id": "frontend.architecture",
    "title": "Frontend Architecture",
    "version": "1.4.0-beta",
    "description": "Layer React components into views, hooks, domain models and data access.",
    "triggers": ["refactor a component", "split a large view"],
    "inputs": {"component": "path to the component", "framework": "react or preact"},
    "guarantees": ["keeps behavior unchanged", "one concern per layer"],
    "non_goals": ["styling changes"],
    "notes": "Prefer small steps.",
}


def write_descriptor(base, rel_dir: str, data, filename: str = "skill.json") -> str:
    """Write a descriptor (dict, or raw text) into base/rel_dir and return its path."""
    unit_dir = os.path.join(str(base), rel_dir)
    os.makedirs(unit_dir, exist_ok=True)
    path = os.path.join(unit_dir, filename)
    with open(path, "w", encoding="utf-8") as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f, indent=2)
    return path


@pytest.fixture
def skills_root(tmp_path):
    """Path of the skills root inside a temp repo. Not created."""
    return str(tmp_path / "repo" / "skills")


@pytest.fixture
def config(skills_root):
    return ToolkitConfig(root=skills_root)


@pytest.fixture
def logger():
    return SkillLogger()


@pytest.fixture
def sample_path(skills_root):
    return write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
