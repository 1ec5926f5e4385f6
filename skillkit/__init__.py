"""Skill descriptor toolkit: validate skill.json files, render docs, install them."""

__version__ = "0.3.0"
