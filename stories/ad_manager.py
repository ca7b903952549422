from __future__ import annotations

import logging

from .ad_settings import Settings
from .hooks import apply_filters
from .markup import auto_ads_tag, console_log
from .models_ads import AdNetwork
from .services import ServiceBase

logger = logging.getLogger(__name__)


class AdManager(ServiceBase):
    service_id = 'ad_manager'

    def __init__(self, settings: Settings):
        self.settings = settings

    @staticmethod
    def get_requirements() -> list[str]:
        return ['settings']

    def register(self, registry) -> None:
        registry.add_action('web_stories_print_gam', self.print_ad_manager_tag)

    def print_ad_manager_tag(self, data_slot: str = '') -> str:
        if not self.is_enabled():
            return ''

        data_slot = data_slot or self.get_slot_id()
        if not data_slot:
            return console_log('dataSlot is not found for gam')

        configuration = {
            'ad-attributes': {
                'type': 'doubleclick',
                'data-slot': data_slot,
            },
        }

        # Permite que outros módulos alterem a configuração do <amp-story-auto-ads>
        configuration = apply_filters('web_stories_ad_manager_configuration', configuration, data_slot)

        try:
            return auto_ads_tag(configuration)
        except (TypeError, ValueError) as e:
            logger.warning("Configuração do Ad Manager não serializável: %s", e)
            return ''

    def get_slot_id(self) -> str:
        return self.settings.get_setting(Settings.SETTING_NAME_AD_MANAGER_SLOT_ID)

    def is_enabled(self) -> bool:
        return AdNetwork.AD_MANAGER == self.settings.get_setting(Settings.SETTING_NAME_AD_NETWORK, AdNetwork.NONE)
