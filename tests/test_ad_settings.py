"""
tests/test_ad_settings.py

Settings store: typed lookups over the AdSettings singleton.
"""

import pytest
from django.test import TestCase

from stories.ad_settings import Settings
from stories.models_ads import AdNetwork, AdSettings

from helpers import make_settings


class TestGetSetting:
    def test_returns_field_value(self):
        s = make_settings(ad_network=AdNetwork.ADSENSE, adsense_publisher_id='ca-pub-1')
        assert s.get_setting(Settings.SETTING_NAME_AD_NETWORK) == 'adsense'
        assert s.get_setting(Settings.SETTING_NAME_ADSENSE_PUBLISHER_ID) == 'ca-pub-1'

    def test_empty_value_uses_default(self):
        s = make_settings(adsense_slot_id='')
        assert s.get_setting(Settings.SETTING_NAME_ADSENSE_SLOT_ID, 'fallback') == 'fallback'

    def test_null_without_default_is_empty_string(self):
        s = make_settings(ad_manager_slot_id=None)
        assert s.get_setting(Settings.SETTING_NAME_AD_MANAGER_SLOT_ID) == ''

    def test_unknown_name_raises(self):
        with pytest.raises(KeyError):
            make_settings().get_setting('web_stories_nope')


class TestAdSettingsSingleton(TestCase):
    def test_load_creates_default_row(self):
        obj = AdSettings.load()
        self.assertEqual(obj.pk, 1)
        self.assertEqual(obj.ad_network, AdNetwork.NONE)

    def test_save_always_overwrites_pk_1(self):
        AdSettings(ad_network=AdNetwork.ADSENSE).save()
        AdSettings(ad_network=AdNetwork.AD_MANAGER).save()
        self.assertEqual(AdSettings.objects.count(), 1)
        self.assertEqual(AdSettings.load().ad_network, AdNetwork.AD_MANAGER)

    def test_settings_loads_lazily_from_db(self):
        AdSettings(ad_network=AdNetwork.ADSENSE, adsense_slot_id='42').save()
        s = Settings()
        self.assertEqual(s.get_setting(Settings.SETTING_NAME_ADSENSE_SLOT_ID), '42')
