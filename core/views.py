"""
Health and readiness endpoints.

/ready/ answers whether the console can serve the server group pages:
the database and cache respond, the session store that keeps list
selections is usable, and the console apps' migrations are applied.
"""

import logging
from importlib import import_module
from typing import Callable, Dict

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.db.migrations.executor import MigrationExecutor
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)

SERVICE_NAME = "provisioning-console"

# Apps whose tables the console pages query
CONSOLE_APPS = ("accounts", "server_groups", "activation_keys")


class CheckFailed(Exception):
    """Raised by a check that ran but found the component unusable."""


def check_database() -> None:
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")


def check_cache() -> None:
    cache.set("ready_check", "ok", 10)
    if cache.get("ready_check") != "ok":
        raise CheckFailed("cache did not return the stored value")


def check_sessions() -> None:
    """Query the configured session backend."""
    session_store = import_module(settings.SESSION_ENGINE).SessionStore
    session_store().exists("ready-check")


def check_migrations() -> None:
    executor = MigrationExecutor(connection)
    targets = [node for node in executor.loader.graph.leaf_nodes() if node[0] in CONSOLE_APPS]
    pending = executor.migration_plan(targets)
    if pending:
        names = ", ".join(f"{migration.app_label}.{migration.name}" for migration, _ in pending)
        raise CheckFailed(f"unapplied migrations: {names}")


READINESS_CHECKS: Dict[str, Callable[[], None]] = {
    "database": check_database,
    "cache": check_cache,
    "sessions": check_sessions,
    "migrations": check_migrations,
}


def run_check(name: str, check: Callable[[], None]) -> Dict[str, object]:
    """Run one check; failures are reported, never raised."""
    try:
        check()
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Health check %s failed: %s", name, e)
        return {"healthy": False, "error": str(e)}
    return {"healthy": True}


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Liveness endpoint."""

    def get(self, _request):
        return JsonResponse({"status": "healthy", "service": SERVICE_NAME})


@method_decorator(csrf_exempt, name="dispatch")
class ComponentHealthView(View):
    """Reports the health of a single backing component."""

    component = ""
    check = staticmethod(check_database)

    def get(self, _request):
        outcome = run_check(self.component, self.check)
        if outcome["healthy"]:
            return JsonResponse({"status": "healthy", self.component: "connected"})
        return JsonResponse(
            {"status": "unhealthy", self.component: "disconnected", "error": outcome["error"]},
            status=503,
        )


class HealthDBView(ComponentHealthView):
    component = "database"
    check = staticmethod(check_database)


class HealthCacheView(ComponentHealthView):
    component = "cache"
    check = staticmethod(check_cache)


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness endpoint; 503 until every check in READINESS_CHECKS passes."""

    def get(self, _request):
        outcomes = {name: run_check(name, check) for name, check in READINESS_CHECKS.items()}
        ready = all(outcome["healthy"] for outcome in outcomes.values())

        body = {
            "status": "ready" if ready else "not_ready",
            "service": SERVICE_NAME,
            "checks": {name: outcome["healthy"] for name, outcome in outcomes.items()},
        }
        errors = {name: outcome["error"] for name, outcome in outcomes.items() if "error" in outcome}
        if errors:
            body["errors"] = errors
        return JsonResponse(body, status=200 if ready else 503)
