"""Occupation Catalogue — the fixed list offered by the profile form.

Invariants:
    - Order is part of the contract (the form renders it as-is)
    - list_occupations() returns a fresh list on every call
"""

OCCUPATIONS: tuple[str, ...] = (
    "Developer",
    "Tester",
    "System Analyst",
    "Project Manager",
    "Support",
)


def list_occupations() -> list[str]:
    return list(OCCUPATIONS)
