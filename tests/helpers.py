"""
Shared test helpers.
"""

import io
import json

from stories.ad_settings import Settings
from stories.models_ads import AdSettings


def make_settings(**fields):
    # Registro em memória, sem tocar no banco
    return Settings(AdSettings(**fields))


def json_body(payload):
    return io.BytesIO(json.dumps(payload).encode('utf-8'))


def tag_json(html):
    """Extract and parse the JSON inside <amp-story-auto-ads>."""
    start = html.index('<script type="application/json">') + len('<script type="application/json">')
    end = html.index('</script>', start)
    return json.loads(html[start:end])
