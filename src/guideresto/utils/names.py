"""Case-insensitive name matching.

SQLite ``lower()`` only folds ASCII and ``LIKE`` treats ``%`` and ``_`` as
wildcards, so SQL ``icontains`` / ``iexact`` results are re-checked here.
"""


def same_name(a: str | None, b: str | None) -> bool:
    return a is not None and b is not None and a.casefold() == b.casefold()


def contains_name(name: str | None, fragment: str) -> bool:
    return name is not None and fragment.casefold() in name.casefold()
