from django.contrib import admin
from .models_ads import AdSettings

@admin.register(AdSettings)
class AdSettingsAdmin(admin.ModelAdmin):
    # Singleton no Admin: só edita, não cria vários

    def has_add_permission(self, request):
        if AdSettings.objects.exists():
            return False
        return super().has_add_permission(request)

    def has_delete_permission(self, request, obj=None):
        # Para desligar, escolha a rede "Nenhuma"
        return False

    fieldsets = (
        ('Rede de Anúncios', {
            'description': 'Define qual tag vai dentro do <amp-story-auto-ads> das stories.',
            'fields': ('ad_network',)
        }),
        ('Google AdSense', {
            'description': 'Os dois campos precisam estar preenchidos para o anúncio aparecer.',
            'fields': ('adsense_publisher_id', 'adsense_slot_id')
        }),
        ('Google Ad Manager', {
            'fields': ('ad_manager_slot_id',)
        }),
    )

    list_display = ('ad_network', 'adsense_publisher_id', 'adsense_slot_id', 'ad_manager_slot_id')
