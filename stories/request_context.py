from __future__ import annotations

from dataclasses import dataclass

from django.http import HttpRequest


@dataclass(frozen=True)
class RequestContext:
    host: str = ''
    request_uri: str = ''

    @classmethod
    def from_request(cls, request: HttpRequest | None) -> 'RequestContext':
        if request is None:
            return cls()
        # HTTP_HOST cru: get_host() levanta DisallowedHost fora do ALLOWED_HOSTS
        host = request.META.get('HTTP_HOST') or ''
        return cls(host=host, request_uri=request.get_full_path())
