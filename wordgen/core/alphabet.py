"""
Character sets used for combination generation.
"""

import string


UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase
NUMBERS = string.digits
# space through '/', ':' through '@', '[' through '`', '{' through '~'
SYMBOLS = "".join(chr(c) for c in range(0x20, 0x7f) if not chr(c).isalnum())


def build_alphabet(no_upper: bool = False, no_lower: bool = False,
                   no_numbers: bool = False, no_symbols: bool = False) -> str:
    """Build the ordered alphabet from the enabled character categories"""
    alphabet = ""
    if not no_upper:
        alphabet += UPPER
    if not no_lower:
        alphabet += LOWER
    if not no_numbers:
        alphabet += NUMBERS
    if not no_symbols:
        alphabet += SYMBOLS
    return alphabet
