from django import template

from stories.plugin import build_registry

register = template.Library()

_REGISTRY_KEY = 'web_stories_registry'


def _registry(context):
    # Reaproveita o registro durante a renderização do template
    render_context = context.render_context
    if _REGISTRY_KEY not in render_context:
        render_context[_REGISTRY_KEY] = build_registry(context.get('request'))
    return render_context[_REGISTRY_KEY]


@register.simple_tag(takes_context=True)
def web_stories_print_analytics(context):
    return _registry(context).do_action('web_stories_print_analytics')


@register.simple_tag(takes_context=True)
def web_stories_print_gam(context, data_slot=''):
    return _registry(context).do_action('web_stories_print_gam', data_slot or '')


@register.simple_tag(takes_context=True)
def web_stories_adsense(context, data_ad_client='', data_ad_slot=''):
    return _registry(context).do_action('web_stories_print_adsense', data_ad_client or '', data_ad_slot or '')
