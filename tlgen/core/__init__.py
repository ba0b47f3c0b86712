"""Validation and label assembly for Traefik docker labels"""

from tlgen.core.validators import is_valid_namespace, is_valid_host, is_valid_port
from tlgen.core.rules import RouteRule, build_rule
from tlgen.core.labels import generate_labels, label_pairs, render_block

__all__ = [
    "is_valid_namespace",
    "is_valid_host",
    "is_valid_port",
    "RouteRule",
    "build_rule",
    "generate_labels",
    "label_pairs",
    "render_block",
]
