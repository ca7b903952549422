from __future__ import annotations

import json

from django.utils.html import format_html
from django.utils.safestring import mark_safe

AUTO_ADS_TEMPLATE = (
    '<amp-story-auto-ads>\n'
    '<script type="application/json">\n'
    '{}\n'
    '</script>\n'
    '</amp-story-auto-ads>'
)

CONSOLE_PREFIX = 'WP-WEB-STORIES::'

# Mesmos escapes do json_script: o JSON não pode fechar o <script>
_JSON_SCRIPT_ESCAPES = {
    ord('>'): '\\u003E',
    ord('<'): '\\u003C',
    ord('&'): '\\u0026',
}


def auto_ads_tag(configuration: dict) -> str:
    # Sem escapar barras nem Unicode
    payload = json.dumps(configuration, ensure_ascii=False).translate(_JSON_SCRIPT_ESCAPES)
    return format_html(AUTO_ADS_TEMPLATE, mark_safe(payload))


def console_log(message: str) -> str:
    # Só para mensagens fixas do próprio plugin
    return mark_safe(f"<script>console.log('{CONSOLE_PREFIX} {message}');</script>")
