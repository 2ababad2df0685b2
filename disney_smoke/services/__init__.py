"""Services package for endpoint access and checks."""

from disney_smoke.services.character_api import CharacterApiClient
from disney_smoke.services.checks import (
    check_data_shape,
    check_names_present,
    check_page_size,
    check_specific_character,
    check_status_code,
)

__all__ = [
    "CharacterApiClient",
    "check_data_shape",
    "check_names_present",
    "check_page_size",
    "check_specific_character",
    "check_status_code",
]
