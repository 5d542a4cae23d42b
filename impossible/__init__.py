# Impossible Programs
# Exhaustive search over infinite bit sequences

"""
Decide properties of infinite bit sequences by searching finite prefixes.

Predicates read bits through a BitSequence view and answer True, False,
or None when they need a bit they were not given. The engine grows the
prefix until every answer is decided.
"""
