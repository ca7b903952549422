# Registra os admins definidos em módulos separados
from . import admin_ads  # noqa: F401
