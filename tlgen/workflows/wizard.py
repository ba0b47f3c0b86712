"""Label wizard: collect answers field by field"""

import logging
from typing import List, Optional

from rich.markup import escape

from tlgen.core.rules import RouteRule, build_rule
from tlgen.core.validators import is_valid_host, is_valid_namespace, is_valid_port
from tlgen.display import LabelReporter
from tlgen.models.config import LabelConfig, WizardDefaults
from tlgen.prompter import Prompter

logger = logging.getLogger(__name__)


class LabelWizard:
    """Linear question flow producing a LabelConfig

    Each validated field is asked again until the answer passes; blank
    answers take the default where the field has one.
    """

    def __init__(self, prompter: Prompter, reporter: LabelReporter, defaults: Optional[WizardDefaults] = None):
        self.prompter = prompter
        self.reporter = reporter
        self.defaults = defaults or WizardDefaults()

    def run(self) -> LabelConfig:
        """Ask every question in order

        Returns:
            Validated label configuration
        """
        namespace = self.prompt_namespace()
        rule = self.prompt_rules()
        entrypoints = self.prompt_entrypoints()
        port = self.prompt_port()
        middlewares = self.prompt_middlewares()
        service_name = self.prompt_service_name()
        network = self.prompt_network()

        return LabelConfig(
            namespace=namespace,
            network=network,
            rule=rule,
            port=port,
            entrypoints=entrypoints,
            middlewares=middlewares,
            service_name=service_name,
        )

    def prompt_namespace(self) -> str:
        self.reporter.section("1. Namespace", "Router and service name, e.g. adminer, api-gateway")

        while True:
            namespace = self.prompter.ask("[cyan]   Namespace[/cyan]")

            if not namespace:
                self.reporter.error("Namespace cannot be empty")
                continue

            if not is_valid_namespace(namespace):
                logger.debug("Rejected namespace %r", namespace)
                self.reporter.error("Namespace may only contain letters, digits, dash (-) and underscore (_)")
                continue

            self.reporter.success("Namespace valid")
            return namespace

    def prompt_host(self) -> str:
        while True:
            host = self.prompter.ask("[cyan]   Host[/cyan] [dim](e.g. api.domain.com)[/dim]")

            if not host:
                self.reporter.error("Host cannot be empty")
                continue

            if not is_valid_host(host):
                logger.debug("Rejected host %r", host)
                self.reporter.error("Invalid host format")
                continue

            self.reporter.success("Host valid")
            return host

    def prompt_rules(self) -> str:
        """Collect one or more host/path pairs and fold them into a rule"""
        self.reporter.section("2. Host and Path", "Several host/path rules can be added")

        rules: List[RouteRule] = []
        while True:
            host = self.prompt_host()
            prefix = self.prompter.ask("[cyan]   Path prefix[/cyan] [dim](optional, e.g. /api/v1)[/dim]")

            route = RouteRule(host, prefix)
            rules.append(route)
            self.reporter.success(f"Rule: {route.expression()}")

            if not self.prompter.confirm("\n[cyan]   Add another host/path?[/cyan]"):
                break

        return build_rule(rules)

    def prompt_entrypoints(self) -> str:
        self.reporter.section("3. Entrypoints", "Traefik listener name (e.g. web, websecure)")

        entrypoints = self.prompter.ask(
            f"[cyan]   Entrypoints[/cyan] [dim](default: {escape(self.defaults.entrypoint)})[/dim]",
            default=self.defaults.entrypoint,
        )
        self.reporter.success(f"Using entrypoint: {entrypoints}")
        return entrypoints

    def prompt_port(self) -> str:
        self.reporter.section("4. Container Port", "Internal container port Traefik forwards to")

        while True:
            port = self.prompter.ask(
                f"[cyan]   Port[/cyan] [dim](default: {escape(self.defaults.port)})[/dim]",
                default=self.defaults.port,
            )

            if not is_valid_port(port):
                logger.debug("Rejected port %r", port)
                self.reporter.error("Port must be a number between 1 and 65535")
                continue

            self.reporter.success(f"Port valid: {port}")
            return port

    def prompt_middlewares(self) -> str:
        """Pick suggested middlewares, then add custom ones until a blank answer"""
        self.reporter.section("5. Middlewares", "Middlewares process requests before they reach the service")

        selected: List[str] = []
        if self.prompter.confirm("[cyan]   Use middlewares?[/cyan]"):
            self.reporter.hint("Choose from commonly used middlewares:")
            for name in self.defaults.middlewares:
                if self.prompter.confirm(f"   • [yellow]{escape(name)}[/yellow]?"):
                    selected.append(name)
                    self.reporter.success(f"{name} added")

            self.reporter.hint("Add custom middlewares (blank to finish):")
            while True:
                custom = self.prompter.ask("[cyan]   Custom middleware name[/cyan]")
                if not custom:
                    break
                selected.append(custom)
                self.reporter.success(f"{custom} added")

        if selected:
            self.reporter.success(f"{len(selected)} middleware(s) selected")

        return ",".join(selected)

    def prompt_service_name(self) -> str:
        self.reporter.section("6. Service Name")
        self.reporter.info("Leave empty to let Traefik use implicit service discovery")

        service_name = self.prompter.ask("[cyan]   Service name[/cyan] [dim](optional)[/dim]")

        if service_name:
            self.reporter.success(f"Using service: {service_name}")
        else:
            self.reporter.success("Using implicit service discovery")
        return service_name

    def prompt_network(self) -> str:
        self.reporter.section("7. Docker Network", "Network shared by Traefik and this container")

        network = self.prompter.ask(
            f"[cyan]   Network[/cyan] [dim](default: {escape(self.defaults.network)})[/dim]",
            default=self.defaults.network,
        )
        self.reporter.success(f"Using network: {network}")
        return network
