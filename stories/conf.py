from django.conf import settings

DEFAULTS = {
    'DEFAULT_PROPERTY_CODE': '4239',
    'API_ENDPOINT': 'https://gas.platform.gamezop.com/v3/sdk/ad-data?product=quizzop&propertyCode={property_code}',
    'API_TIMEOUT': 8.0,
    'API_CACHE_TTL': 0,
    'USER_AGENT': 'WebStories/1.0',
}


def get_option(name: str):
    # Lido a cada chamada para respeitar override_settings nos testes
    overrides = getattr(settings, 'WEB_STORIES_ADS', None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
