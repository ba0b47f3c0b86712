"""Traefik label assembly

Turns a validated LabelConfig into the label list of a docker-compose
service. Nothing here validates: LabelConfig refuses bad values on
construction.
"""

from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from tlgen.models.config import LabelConfig

LABELS_HEADER = "    labels:"
LABEL_INDENT = "      "


def label_pairs(config: "LabelConfig") -> Dict[str, str]:
    """Build labels as an ordered key/value mapping

    The first five keys are always present. The service and middlewares
    keys follow, in that order, only when the fields are non-empty.
    """
    router = f"traefik.http.routers.{config.namespace}"
    pairs = {
        "traefik.enable": "true",
        "traefik.docker.network": config.network,
        f"{router}.rule": config.rule,
        f"traefik.http.services.{config.namespace}.loadbalancer.server.port": config.port,
        f"{router}.entrypoints": config.entrypoints,
    }

    if config.service_name:
        pairs[f"{router}.service"] = config.service_name

    if config.middlewares:
        pairs[f"{router}.middlewares"] = config.middlewares

    return pairs


def generate_labels(config: "LabelConfig") -> List[str]:
    """Render labels as compose list items, e.g. `      - "traefik.enable=true"`"""
    return [
        f'{LABEL_INDENT}- "{key}={value}"'
        for key, value in label_pairs(config).items()
    ]


def render_block(lines: List[str]) -> str:
    """Prefix the `labels:` key and join lines for display or saving"""
    return "\n".join([LABELS_HEADER, *lines])
