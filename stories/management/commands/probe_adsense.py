from __future__ import annotations

from django.core.management.base import BaseCommand

from stories.ad_settings import Settings
from stories.adsense import AdSense
from stories.request_context import RequestContext


class Command(BaseCommand):
    help = "Mostra o propertyCode, a URL da API e o client/slot que o AdSense usaria para um host/URL."

    def add_arguments(self, parser):
        parser.add_argument(
            '--host',
            default='',
            help='Host da requisição (ex.: 1234.exemplo.com).',
        )
        parser.add_argument(
            '--uri',
            default='',
            help='Caminho com querystring (ex.: /story/?id=5678).',
        )
        parser.add_argument(
            '--render',
            action='store_true',
            help='Também imprime a tag <amp-story-auto-ads> final.',
        )

    def handle(self, *args, **options):
        ctx = RequestContext(host=options['host'] or '', request_uri=options['uri'] or '')
        adsense = AdSense(Settings(), ctx)

        self.stdout.write(f"propertyCode: {adsense.property_code}")
        self.stdout.write(f"endpoint: {adsense.api_endpoint}")

        data = adsense.fetch_adsense_data()
        if data is None:
            self.stdout.write(self.style.WARNING("Sem dados do AdSense (falha na API ou resposta inválida)."))
        else:
            self.stdout.write(self.style.SUCCESS(f"client: {data['client']}  slot: {data['slot']}"))

        if options['render']:
            html = adsense.print_adsense_tag()
            self.stdout.write(html or self.style.WARNING("Nenhuma tag: rede desativada ou IDs vazios."))
