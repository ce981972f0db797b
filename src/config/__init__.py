"""Career engine configuration: settings class and static JSON catalogs."""

from config.career_settings import CareerSettings

__all__ = ['CareerSettings']
