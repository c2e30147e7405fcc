"""
Core functionality for wordgen.
"""

from .alphabet import build_alphabet
from .dispatcher import CombinationDispatcher
from .generator import (
    CandidateGenerator,
    CombinationGenerator,
    PermutationGenerator,
)
from .output import OutputSink
from .trtable import TranslationTable
from .worker import WorkerSlot, combination_worker
