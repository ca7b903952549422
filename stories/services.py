from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured
from django.utils.safestring import mark_safe


class ServiceBase:
    """Serviço do plugin: liga suas operações a pontos de extensão no ``register()``.

    ``service_id`` identifica o serviço no registro; ``get_requirements()`` lista
    os ids que precisam estar registrados antes dele.
    """

    service_id = ''

    @classmethod
    def create(cls, registry: 'ServiceRegistry'):
        return cls(registry.get('settings'))

    @staticmethod
    def get_requirements() -> list[str]:
        return []

    def register(self, registry: 'ServiceRegistry') -> None:
        pass


class ServiceRegistry:
    def __init__(self, request_context=None):
        self.request_context = request_context
        self._services: dict[str, ServiceBase] = {}
        self._actions: dict[str, list[tuple[int, int, object]]] = {}
        self._seq = 0

    def get(self, service_id: str) -> ServiceBase:
        try:
            return self._services[service_id]
        except KeyError:
            raise ImproperlyConfigured(f"Serviço '{service_id}' não foi registrado.") from None

    def has(self, service_id: str) -> bool:
        return service_id in self._services

    def register_services(self, classes) -> None:
        by_id = {cls.service_id: cls for cls in classes}
        for service_id in _resolve_order(by_id):
            service = by_id[service_id].create(self)
            self._services[service_id] = service
            service.register(self)

    def add_action(self, name: str, callback, priority: int = 10) -> None:
        self._seq += 1
        self._actions.setdefault(name, []).append((priority, self._seq, callback))

    def do_action(self, name: str, *args) -> str:
        # Junta o HTML devolvido por cada callback, na ordem de prioridade
        out = []
        for _, _, callback in sorted(self._actions.get(name, []), key=lambda x: (x[0], x[1])):
            html = callback(*args)
            if html:
                out.append(html)
        return mark_safe(''.join(out))


def _resolve_order(by_id: dict) -> list[str]:
    order: list[str] = []
    visiting: set[str] = set()

    def visit(service_id: str, chain: tuple[str, ...]):
        if service_id in order:
            return
        if service_id not in by_id:
            raise ImproperlyConfigured(
                f"Requisito desconhecido '{service_id}' (pedido por {chain[-1] if chain else '?'})."
            )
        if service_id in visiting:
            raise ImproperlyConfigured(f"Dependência circular: {' -> '.join(chain + (service_id,))}")
        visiting.add(service_id)
        for req in by_id[service_id].get_requirements():
            visit(req, chain + (service_id,))
        visiting.discard(service_id)
        order.append(service_id)

    for service_id in by_id:
        visit(service_id, ())
    return order
