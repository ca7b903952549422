from .models_ads import AdNetwork, AdSettings

__all__ = ['AdNetwork', 'AdSettings']
