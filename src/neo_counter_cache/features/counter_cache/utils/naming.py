"""Naming helpers used to derive binding defaults.

Regular English inflections are handled by suffix rules; nouns whose
plural ends in ``-ses``, ``-zes`` or changes its stem are listed in
``IRREGULAR_PLURALS``, since ``-ses`` alone cannot tell ``statuses`` from
``databases``. Bindings for anything else should pass ``owner_table`` or
``foreign_key`` explicitly.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# singular -> plural
IRREGULAR_PLURALS = {
    "alias": "aliases",
    "analysis": "analyses",
    "bus": "buses",
    "campus": "campuses",
    "child": "children",
    "person": "people",
    "quiz": "quizzes",
    "status": "statuses",
    "virus": "viruses",
}
_IRREGULAR_SINGULARS = {plural: singular for singular, plural in IRREGULAR_PLURALS.items()}


def snake_case(name: str) -> str:
    """Convert ``BlogPost`` or ``blog-post`` to ``blog_post``."""
    name = _CAMEL_BOUNDARY.sub("_", name.strip())
    return re.sub(r"[\s\-]+", "_", name).lower()


def _split_last(word: str):
    # Inflect only the last segment of snake_case compounds
    head, sep, last = word.rpartition("_")
    return head + sep, last


def singularize(word: str) -> str:
    """Return the singular form of a plural noun."""
    head, last = _split_last(word)

    if last in _IRREGULAR_SINGULARS:
        return head + _IRREGULAR_SINGULARS[last]
    if last.endswith("ies") and len(last) > 3:
        return head + last[:-3] + "y"
    if last.endswith(("sses", "xes", "ches", "shes", "zzes")):
        return head + last[:-2]
    if last.endswith("s") and not last.endswith(("ss", "us", "is")):
        return head + last[:-1]
    return word


def pluralize(word: str) -> str:
    """Return the plural form of a singular noun."""
    head, last = _split_last(word)

    if last in IRREGULAR_PLURALS:
        return head + IRREGULAR_PLURALS[last]
    if last.endswith("y") and len(last) > 1 and last[-2] not in "aeiou":
        return head + last[:-1] + "ies"
    if last.endswith(("s", "x", "ch", "sh", "z")):
        return head + last + "es"
    return head + last + "s"


def default_owner_table(entity_type: str) -> str:
    """Derive the conventional table name for an entity type."""
    return pluralize(snake_case(entity_type))


def default_foreign_key(owner_table: str) -> str:
    """Derive the child foreign-key column for a parent table."""
    return f"{singularize(owner_table)}_id"
