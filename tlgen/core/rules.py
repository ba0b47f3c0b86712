"""Router rule construction"""

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True)
class RouteRule:
    """One host match, optionally narrowed by a path prefix"""
    host: str
    path_prefix: str = ""

    def expression(self) -> str:
        clause = f"Host(`{self.host}`)"
        if self.path_prefix:
            clause += f" && PathPrefix(`{self.path_prefix}`)"
        return clause


def build_rule(pairs: Iterable[Union[RouteRule, Tuple[str, str]]]) -> str:
    """Join host/path clauses with `||` in the order given

    Order is kept and duplicates are not removed: Traefik may read the
    rule left to right. An empty input gives an empty rule.

    Args:
        pairs: RouteRule instances or (host, path_prefix) tuples

    Returns:
        Traefik rule expression
    """
    clauses = []
    for pair in pairs:
        if not isinstance(pair, RouteRule):
            pair = RouteRule(*pair)
        clauses.append(pair.expression())
    return " || ".join(clauses)
