"""Defaults used when the user leaves a question blank"""

DEFAULT_ENTRYPOINT = "web"
DEFAULT_PORT = "80"
DEFAULT_NETWORK = "hasanNet"
DEFAULT_OUTPUT_FILE = "traefik-labels.yml"

# Offered one by one when the user opts into middlewares
COMMON_MIDDLEWARES = [
    "logger",
    "cloudflarewarp",
    "auth-user",
    "common-ratelimit",
    "strip-all-prefix",
    "error-pages",
    "gzip-compress",
]
