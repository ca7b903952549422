from __future__ import annotations

import json
import logging
import re
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.parse import parse_qs, urlsplit
from urllib.request import Request, urlopen

from django.core.cache import cache
from django.utils.html import escape

from .ad_settings import Settings
from .conf import get_option
from .markup import auto_ads_tag, console_log
from .models_ads import AdNetwork
from .request_context import RequestContext
from .services import ServiceBase

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$')


def is_numeric(value) -> bool:
    return isinstance(value, str) and bool(_NUMERIC_RE.match(value))


def _http_get_json(url: str, timeout: float = 8.0):
    req = Request(
        url,
        headers={
            'User-Agent': get_option('USER_AGENT'),
            'Accept': 'application/json',
        },
    )
    with urlopen(req, timeout=timeout) as resp:
        raw = resp.read().decode('utf-8')
    return json.loads(raw)


def _cached_fetch_json(cache_key: str, url: str, ttl_seconds: int, timeout: float):
    if ttl_seconds <= 0:
        return _http_get_json(url, timeout=timeout)
    cached = cache.get(cache_key)
    if cached is not None:
        return cached
    data = _http_get_json(url, timeout=timeout)
    cache.set(cache_key, data, ttl_seconds)
    return data


class _AdSenseBase(ServiceBase):
    def __init__(self, settings: Settings):
        self.settings = settings

    @staticmethod
    def get_requirements() -> list[str]:
        return ['settings']

    def get_publisher_id(self) -> str:
        return self.settings.get_setting(Settings.SETTING_NAME_ADSENSE_PUBLISHER_ID)

    def get_slot_id(self) -> str:
        return self.settings.get_setting(Settings.SETTING_NAME_ADSENSE_SLOT_ID)

    def is_enabled(self) -> bool:
        return AdNetwork.ADSENSE == self.settings.get_setting(Settings.SETTING_NAME_AD_NETWORK, AdNetwork.NONE)


class AdSense(_AdSenseBase):
    """AdSense com client/slot vindos da API de configuração de anúncios.

    O código da propriedade sai do host (``1234.exemplo.com``) ou do parâmetro
    ``?id=`` da URL, e é calculado uma vez por instância.
    """

    service_id = 'adsense'

    def __init__(self, settings: Settings, request_context: RequestContext | None = None):
        super().__init__(settings)
        self.request_context = request_context or RequestContext()
        self.property_code = self.extract_property_code()
        self.api_endpoint = self.construct_api_endpoint()

    @classmethod
    def create(cls, registry):
        return cls(registry.get('settings'), registry.request_context)

    def register(self, registry) -> None:
        registry.add_action('web_stories_print_analytics', self.print_adsense_tag)

    def extract_property_code(self) -> str:
        default_property_code = str(get_option('DEFAULT_PROPERTY_CODE'))

        host = self.request_context.host
        if host:
            # Primeiro rótulo do host
            candidate = host.split('.')[0]
            if is_numeric(candidate):
                return candidate

        uri = self.request_context.request_uri
        if uri:
            query = urlsplit(uri).query
            if query:
                ids = parse_qs(query).get('id')
                if ids and is_numeric(ids[-1]):
                    return ids[-1]

        return default_property_code

    def construct_api_endpoint(self) -> str:
        return get_option('API_ENDPOINT').format(property_code=self.property_code)

    def fetch_adsense_data(self) -> dict | None:
        try:
            data = _cached_fetch_json(
                f"web_stories:adsense:{self.property_code}",
                self.api_endpoint,
                ttl_seconds=int(get_option('API_CACHE_TTL') or 0),
                timeout=float(get_option('API_TIMEOUT')),
            )
        except (HTTPError, URLError, TimeoutError, OSError, HTTPException, ValueError) as e:
            logger.warning("Falha ao buscar dados do AdSense em %s: %s", self.api_endpoint, e)
            return None

        try:
            client_id = data['data']['adConfig']['adsenseClientId']
        except (KeyError, TypeError):
            logger.debug("Resposta sem data.adConfig.adsenseClientId (propertyCode=%s)", self.property_code)
            return None

        if not isinstance(client_id, str):
            logger.debug("adsenseClientId inválido: %r", client_id)
            return None

        parts = client_id.split('|')
        if len(parts) != 2:
            logger.debug("adsenseClientId fora do formato client|slot: %r", client_id)
            return None

        return {
            'client': parts[0],
            'slot': parts[1],
        }

    def print_adsense_tag(self) -> str:
        publisher = self.get_publisher_id()
        slot = self.get_slot_id()
        enabled = self.is_enabled()

        if not enabled or not publisher or not slot:
            return ''

        adsense_data = self.fetch_adsense_data()
        if not adsense_data:
            return ''

        return auto_ads_tag({
            'version': 'v0.4',
            'propertyCode': self.property_code,
            'ad-attributes': {
                'type': 'adsense',
                'data-ad-client': escape(adsense_data['client']),
                'data-ad-slot': escape(adsense_data['slot']),
            },
        })


class InlineAdSense(_AdSenseBase):
    """AdSense com client/slot informados pelo template (ou pela configuração)."""

    service_id = 'inline_adsense'

    def register(self, registry) -> None:
        registry.add_action('web_stories_print_adsense', self.print_adsense_tag)

    def print_adsense_tag(self, data_ad_client: str = '', data_ad_slot: str = '') -> str:
        if not self.is_enabled():
            return ''

        data_ad_client = data_ad_client or self.get_publisher_id()
        data_ad_slot = data_ad_slot or self.get_slot_id()

        if not data_ad_client or not data_ad_slot:
            return console_log('data-ad-client or data-ad-slot is not found for adsense')

        return auto_ads_tag({
            'ad-attributes': {
                'type': 'adsense',
                'data-ad-client': escape(data_ad_client),
                'data-ad-slot': escape(data_ad_slot),
            },
        })
