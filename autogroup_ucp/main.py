"""
AutoGroup UCP - Capability Server

The FastAPI application factory. Serving it is left to the host
(e.g. any ASGI server pointed at autogroup_ucp.main:app).
"""

# Load .env file FIRST, before any other imports
# .env.local overrides .env for machine-specific settings
from pathlib import Path
from dotenv import load_dotenv
_env_root = Path(__file__).parent.parent
load_dotenv(_env_root / ".env", override=True)
load_dotenv(_env_root / ".env.local", override=True)

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .api import build_router
from .business import build_demo_manifest
from .capabilities import (
    CapabilityDispatcher,
    CapabilityRegistry,
    capability_dispatcher,
    capability_registry,
    load_manifest,
)
from .config import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("autogroup.main")


def create_app(
    registry: Optional[CapabilityRegistry] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application around a capability registry.

    Without an explicit registry the app serves the process-wide
    capability_registry, so capability_dispatcher reaches the same
    capabilities in-process. A registry that is already sealed is served
    as is.

    Registration errors raised while loading the manifest propagate out
    of the lifespan and abort startup.
    """
    app_settings = app_settings or settings
    if registry is None or registry is capability_registry:
        registry, dispatcher = capability_registry, capability_dispatcher
    else:
        dispatcher = CapabilityDispatcher(registry)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Startup ---
        logger.info("AutoGroup UCP starting up...")

        if not registry.is_sealed:
            if app_settings.load_demo_manifest:
                logger.info("Loading demo manifest for %s", app_settings.business.name)
                load_manifest(registry, build_demo_manifest(app_settings.business), seal=False)
            if app_settings.seal_on_startup:
                registry.seal()

        app.state.registry = registry
        app.state.dispatcher = dispatcher
        logger.info(
            "Serving %d capabilities (rest=%s, rpc=%s)",
            len(registry),
            app_settings.api.rest_enabled,
            app_settings.api.rpc_enabled,
        )

        yield

        # --- Shutdown ---
        logger.info("AutoGroup UCP shutting down")

    app = FastAPI(
        title="AutoGroup UCP",
        description="Business capability registry and dispatch",
        version=__version__,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.include_router(build_router(app_settings.api))
    return app


app = create_app()
