"""String validation predicates.

Both checks are intentionally shallow syntactic tests. Input is
taken as-is: no trimming, no case folding, no normalization.
"""


def is_valid_email(s: str) -> bool:
    """Is there at least one '@' in the string?"""
    return "@" in s


def is_valid_phone_number(s: str) -> bool:
    """Is the string exactly 10 characters long?

    Characters are not inspected, so non-digit strings of the right
    length also pass.
    """
    return len(s) == 10
