"""
tests/test_ad_manager.py

Ad Manager tag and the web_stories_ad_manager_configuration filter.
"""

from stories.ad_manager import AdManager
from stories.hooks import add_filter
from stories.models_ads import AdNetwork

from helpers import make_settings, tag_json


def _manager(**fields):
    fields.setdefault('ad_network', AdNetwork.AD_MANAGER)
    return AdManager(make_settings(**fields))


class TestPrintAdManagerTag:
    def test_disabled_prints_nothing(self):
        assert _manager(ad_network=AdNetwork.NONE).print_ad_manager_tag('/123/story') == ''

    def test_adsense_network_prints_nothing(self):
        assert _manager(ad_network=AdNetwork.ADSENSE).print_ad_manager_tag('/123/story') == ''

    def test_empty_slot_prints_console_diagnostic(self):
        html = _manager().print_ad_manager_tag('')
        assert html == "<script>console.log('WP-WEB-STORIES:: dataSlot is not found for gam');</script>"

    def test_default_configuration(self):
        html = _manager().print_ad_manager_tag('/123/story')
        assert tag_json(html) == {'ad-attributes': {'type': 'doubleclick', 'data-slot': '/123/story'}}

    def test_slashes_and_unicode_unescaped(self):
        html = _manager().print_ad_manager_tag('/123/notícias')
        assert '"/123/notícias"' in html
        assert '\\/' not in html
        assert '\\u' not in html

    def test_slot_falls_back_to_settings(self):
        html = _manager(ad_manager_slot_id='/9/from-settings').print_ad_manager_tag()
        assert tag_json(html)['ad-attributes']['data-slot'] == '/9/from-settings'


class TestConfigurationFilter:
    def test_removing_type_is_reflected_verbatim(self):
        @add_filter('web_stories_ad_manager_configuration')
        def drop_type(configuration, data_slot):
            del configuration['ad-attributes']['type']
            return configuration

        html = _manager().print_ad_manager_tag('/123/story')
        assert tag_json(html) == {'ad-attributes': {'data-slot': '/123/story'}}

    def test_filter_receives_slot_and_can_add_keys(self):
        seen = []

        def add_targeting(configuration, data_slot):
            seen.append(data_slot)
            configuration['ad-attributes']['json'] = {'targeting': {'sec': 'news'}}
            return configuration

        add_filter('web_stories_ad_manager_configuration', add_targeting)
        data = tag_json(_manager().print_ad_manager_tag('/1/a'))
        assert seen == ['/1/a']
        assert data['ad-attributes']['json'] == {'targeting': {'sec': 'news'}}

    def test_unserializable_filter_result_prints_nothing(self):
        add_filter('web_stories_ad_manager_configuration', lambda c, s: {'bad': object()})
        assert _manager().print_ad_manager_tag('/1/a') == ''


class TestScriptBreakout:
    def test_slot_cannot_close_the_json_script(self):
        html = _manager().print_ad_manager_tag('</script><script>alert(1)</script>')
        assert '<script>alert(1)</script>' not in html
        assert html.count('</script>') == 1
        assert tag_json(html)['ad-attributes']['data-slot'] == '</script><script>alert(1)</script>'

    def test_ampersand_is_escaped_but_decodes_back(self):
        html = _manager().print_ad_manager_tag('/1/a&b')
        assert '\\u0026' in html
        assert tag_json(html)['ad-attributes']['data-slot'] == '/1/a&b'
