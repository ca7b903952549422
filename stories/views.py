from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpRequest
from django.shortcuts import render

from .models_ads import AdSettings


@staff_member_required
def story_ads_preview(request: HttpRequest):
    # Story mínima para conferir a tag gerada com a configuração atual
    slot = (request.GET.get('slot') or '').strip()[:255]
    return render(
        request,
        'stories/story_ads_preview.html',
        {'ad_settings': AdSettings.load(), 'data_slot': slot},
    )
