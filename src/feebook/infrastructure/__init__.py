"""Infrastructure layer: concrete implementations of application ports."""

from feebook.infrastructure.model_manager import ModelManager
from feebook.infrastructure.phone import normalize_phone, phone_key
from feebook.infrastructure.sample_data import sample_contacts
from feebook.infrastructure.settings import Settings, load_settings

__all__ = [
    "ModelManager",
    "Settings",
    "load_settings",
    "normalize_phone",
    "phone_key",
    "sample_contacts",
]
