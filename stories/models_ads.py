from django.db import models


class AdNetwork(models.TextChoices):
    NONE = 'none', 'Nenhuma'
    ADSENSE = 'adsense', 'Google AdSense'
    AD_MANAGER = 'admanager', 'Google Ad Manager'


class AdSettings(models.Model):
    # Singleton com a configuração de anúncios das stories
    ad_network = models.CharField(
        max_length=20,
        choices=AdNetwork.choices,
        default=AdNetwork.NONE,
        verbose_name="Rede de Anúncios",
        help_text="Escolha qual rede vai preencher o <amp-story-auto-ads>. 'Nenhuma' desliga os anúncios.",
    )

    adsense_publisher_id = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="AdSense: ID do Publicador",
        help_text="Exemplo: ca-pub-1234567890123456.",
    )

    adsense_slot_id = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="AdSense: ID do Bloco (data-ad-slot)",
    )

    ad_manager_slot_id = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        verbose_name="Ad Manager: ID do Slot",
        help_text="Exemplo: /1234567/minha_story. Usado quando o template não informa o slot.",
    )

    def __str__(self):
        return f"Anúncios ({self.get_ad_network_display()})"

    def save(self, *args, **kwargs):
        self.pk = 1 # Garante que só exista 1 registro
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        obj, created = cls.objects.get_or_create(pk=1)
        return obj

    class Meta:
        verbose_name = "Configuração de Anúncios (Web Stories)"
        verbose_name_plural = "Configuração de Anúncios (Web Stories)"
