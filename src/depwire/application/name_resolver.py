"""Application layer - Name casing variants for external module lookup."""

import re
from typing import List

_UPPER_RUN = re.compile(r"[A-Z0-9]+")


def to_dash_case(name: str) -> str:
    """Convert a name to dash case.

    Every run of uppercase letters or digits becomes ``-`` followed by the
    lowercased run.

    Example:
        >>> to_dash_case("socketIo")
        'socket-io'
        >>> to_dash_case("appleOrange2")
        'apple-orange-2'
    """
    return _UPPER_RUN.sub(lambda match: "-" + match.group(0).lower(), name)


def to_dot_case(name: str) -> str:
    """Convert a name to dot case (dash case with ``-`` replaced by ``.``)."""
    return to_dash_case(name).replace("-", ".")


def candidate_names(name: str) -> List[str]:
    """Return the names tried against a module provider, in lookup order.

    The order is verbatim, dash case, dot case. Repeated variants are dropped.
    """
    candidates: List[str] = []
    for candidate in (name, to_dash_case(name), to_dot_case(name)):
        if candidate not in candidates:
            candidates.append(candidate)
    return candidates
