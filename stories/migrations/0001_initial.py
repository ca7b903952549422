from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AdSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "ad_network",
                    models.CharField(
                        choices=[("none", "Nenhuma"), ("adsense", "Google AdSense"), ("admanager", "Google Ad Manager")],
                        default="none",
                        help_text="Escolha qual rede vai preencher o <amp-story-auto-ads>. 'Nenhuma' desliga os anúncios.",
                        max_length=20,
                        verbose_name="Rede de Anúncios",
                    ),
                ),
                (
                    "adsense_publisher_id",
                    models.CharField(
                        blank=True,
                        help_text="Exemplo: ca-pub-1234567890123456.",
                        max_length=100,
                        null=True,
                        verbose_name="AdSense: ID do Publicador",
                    ),
                ),
                (
                    "adsense_slot_id",
                    models.CharField(blank=True, max_length=100, null=True, verbose_name="AdSense: ID do Bloco (data-ad-slot)"),
                ),
                (
                    "ad_manager_slot_id",
                    models.CharField(
                        blank=True,
                        help_text="Exemplo: /1234567/minha_story. Usado quando o template não informa o slot.",
                        max_length=255,
                        null=True,
                        verbose_name="Ad Manager: ID do Slot",
                    ),
                ),
            ],
            options={
                "verbose_name": "Configuração de Anúncios (Web Stories)",
                "verbose_name_plural": "Configuração de Anúncios (Web Stories)",
            },
        ),
    ]
