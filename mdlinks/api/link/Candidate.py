"""Candidate type: a resolution match, existing or hypothetical."""

from typing import TypeAlias

from .ExistingCandidate import ExistingCandidate
from .HypotheticalCandidate import HypotheticalCandidate

Candidate: TypeAlias = ExistingCandidate | HypotheticalCandidate
