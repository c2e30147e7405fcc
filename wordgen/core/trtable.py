"""
Translation table for term permutation.

A translation table maps single characters to the alternatives that may be
substituted for them, e.g. ``a: "4 @"``. Tables are read from YAML files made
of one or more mapping documents::

    a: 4 @
    e: 3
    ---
    a: /-\\

Keys that repeat, within a document or across documents, accumulate their
alternatives in the order encountered.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from wordgen.utils.exceptions import TableLoadError


Alternatives = Union[str, Iterable[str]]
Pairs = List[Tuple[str, Alternatives]]


class _PairsLoader(yaml.BaseLoader):
    """BaseLoader that builds mappings as (key, value) pairs, keeping repeated keys"""

    def construct_pair_list(self, node):
        return self.construct_pairs(node, deep=True)


_PairsLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _PairsLoader.construct_pair_list)


def _split_alternatives(char: str, value) -> List[str]:
    """Turn a table value into a list of alternatives"""
    if isinstance(value, str):
        words = value.split()
    elif isinstance(value, (list, tuple)):
        words = []
        for item in value:
            if not isinstance(item, str):
                raise TableLoadError(
                    f"alternatives for '{char}' must be strings, got {item!r}")
            words.extend(item.split())
    else:
        raise TableLoadError(
            f"alternatives for '{char}' must be a string or a list, got {value!r}")

    if not words:
        raise TableLoadError(f"no alternatives given for '{char}'")
    return words


class TranslationTable:
    """Read-only lookup from a character to its substitution alternatives"""

    def __init__(self, mapping: Optional[Mapping[str, Alternatives]] = None):
        """Initialize from an optional mapping of character to alternatives"""
        self._table: Dict[str, Tuple[str, ...]] = {}
        if mapping is not None:
            self._add_block(mapping)

    @classmethod
    def from_blocks(cls, blocks: Iterable[Mapping[str, Alternatives]]) -> "TranslationTable":
        """Build a table from several mapping blocks, concatenating repeated keys"""
        table = cls()
        for block in blocks:
            table._add_block(block)
        return table

    @classmethod
    def load(cls, path: str) -> "TranslationTable":
        """Load a table from a YAML file

        Args:
            path: Path to the YAML table file

        Returns:
            The fully loaded table

        Raises:
            TableLoadError: If the file is unreadable, empty or malformed
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                # Every scalar stays a string, so "0: o" stays textual
                documents = list(yaml.load_all(f, Loader=_PairsLoader))
        except OSError as e:
            raise TableLoadError(f"could not read table file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise TableLoadError(f"could not parse table file {path}: {e}") from e

        blocks = [doc for doc in documents if doc not in (None, "", [])]
        if not blocks:
            raise TableLoadError(f"table file {path} does not contain any data")
        return cls.from_blocks(blocks)

    def _add_block(self, block: Union[Mapping[str, Alternatives], Pairs]) -> None:
        if isinstance(block, Mapping):
            pairs = list(block.items())
        elif isinstance(block, list) and all(isinstance(p, tuple) and len(p) == 2 for p in block):
            pairs = block
        else:
            raise TableLoadError(f"expected a mapping of letters, got {block!r}")

        for key, value in pairs:
            if not isinstance(key, str) or len(key) != 1:
                raise TableLoadError(f"expected a single letter, but instead got {key!r}")
            words = _split_alternatives(key, value)
            self._table[key] = self._table.get(key, ()) + tuple(words)

    def get(self, char: str) -> Optional[Tuple[str, ...]]:
        """Get the alternatives for a character, or None if it has no entry"""
        return self._table.get(char)

    def __contains__(self, char: str) -> bool:
        return char in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:
        return f"TranslationTable({self._table!r})"
