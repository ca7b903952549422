from __future__ import annotations

from .models_ads import AdSettings
from .services import ServiceBase


class Settings(ServiceBase):
    """Leitura tipada da configuração de anúncios (somente leitura)."""

    service_id = 'settings'

    SETTING_NAME_AD_NETWORK = 'web_stories_ad_network'
    SETTING_NAME_ADSENSE_PUBLISHER_ID = 'web_stories_adsense_publisher_id'
    SETTING_NAME_ADSENSE_SLOT_ID = 'web_stories_adsense_slot_id'
    SETTING_NAME_AD_MANAGER_SLOT_ID = 'web_stories_ad_manager_slot_id'

    FIELDS = {
        SETTING_NAME_AD_NETWORK: 'ad_network',
        SETTING_NAME_ADSENSE_PUBLISHER_ID: 'adsense_publisher_id',
        SETTING_NAME_ADSENSE_SLOT_ID: 'adsense_slot_id',
        SETTING_NAME_AD_MANAGER_SLOT_ID: 'ad_manager_slot_id',
    }

    def __init__(self, record: AdSettings | None = None):
        self._record = record

    @classmethod
    def create(cls, registry):
        return cls()

    @property
    def record(self) -> AdSettings:
        if self._record is None:
            self._record = AdSettings.load()
        return self._record

    def get_setting(self, name: str, default=None):
        field = self.FIELDS[name]
        value = getattr(self.record, field, None)
        if value is None or value == '':
            return '' if default is None else default
        return value
