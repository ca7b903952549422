from __future__ import annotations

from .ad_manager import AdManager
from .ad_settings import Settings
from .adsense import AdSense, InlineAdSense
from .request_context import RequestContext
from .services import ServiceRegistry

SERVICES = (
    AdSense,
    InlineAdSense,
    AdManager,
    Settings,
)


def build_registry(request=None, services=SERVICES) -> ServiceRegistry:
    # Um registro por requisição: o AdSense depende do host/URL atual
    registry = ServiceRegistry(RequestContext.from_request(request))
    registry.register_services(services)
    return registry
