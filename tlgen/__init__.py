"""tlgen - interactive Traefik label generator for docker-compose"""

__version__ = "2.0.0"
