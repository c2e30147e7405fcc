"""
wordgen

Wordlist generator: every combination of N characters over a configurable
alphabet, or every substitution of a term through a translation table.
"""

from wordgen.core.alphabet import build_alphabet
from wordgen.core.dispatcher import CombinationDispatcher
from wordgen.core.generator import (
    CandidateGenerator,
    CombinationGenerator,
    PermutationGenerator,
)
from wordgen.core.output import OutputSink
from wordgen.core.trtable import TranslationTable

__version__ = "0.1.0"
