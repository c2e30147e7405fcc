"""
Candidate generator classes for wordgen.

Generators never collect their output: every completed candidate is handed to
an ``emit`` callback as soon as it is built, since the candidate space can be
far too large to hold in memory.
"""

from abc import ABC, abstractmethod
from typing import Callable

from .trtable import TranslationTable


Emit = Callable[[str], None]


class CandidateGenerator(ABC):
    """Abstract base class for candidate generators"""

    @abstractmethod
    def generate(self, emit: Emit) -> None:
        """Pass every candidate to emit, one at a time"""
        pass

    @abstractmethod
    def get_total_count(self) -> int:
        """Get the number of candidates generate() will emit"""
        pass


class CombinationGenerator(CandidateGenerator):
    """Generator for every fixed-length string over an alphabet

    Candidates come out in odometer order: the leftmost character varies
    slowest, following the alphabet's own order.
    """

    def __init__(self, alphabet: str, length: int, prefix: str = ""):
        """Initialize with alphabet, number of characters to add, and a fixed prefix"""
        if length < 0:
            raise ValueError("Length must be a non-negative integer")
        self.alphabet = alphabet
        self.length = length
        self.prefix = prefix

    def generate(self, emit: Emit) -> None:
        self._combos(self.length, self.prefix, emit)

    def _combos(self, count: int, built: str, emit: Emit) -> None:
        if count == 0:
            emit(built)
            return

        for letter in self.alphabet:
            self._combos(count - 1, built + letter, emit)

    def get_total_count(self) -> int:
        return len(self.alphabet) ** self.length


class PermutationGenerator(CandidateGenerator):
    """Generator for every substitution of a term's characters

    Each character of the term is either kept as is (no table entry) or
    replaced by each of its alternatives in turn. Alternatives may be longer
    than one character, so candidates can differ in length from the term.
    """

    def __init__(self, term: str, table: TranslationTable):
        """Initialize with the term to permute and its translation table"""
        self.term = term
        self.table = table

    def generate(self, emit: Emit) -> None:
        self._permute(0, "", emit)

    def _permute(self, index: int, built: str, emit: Emit) -> None:
        if index == len(self.term):
            emit(built)
            return

        char = self.term[index]
        alternatives = self.table.get(char)
        if not alternatives:
            self._permute(index + 1, built + char, emit)
        else:
            for alternative in alternatives:
                self._permute(index + 1, built + alternative, emit)

    def get_total_count(self) -> int:
        total = 1
        for char in self.term:
            total *= len(self.table.get(char) or ()) or 1
        return total
