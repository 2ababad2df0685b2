"""Schema module for endpoint response models."""

from disney_smoke.schemas.character import Character, CharacterPage

__all__ = ["Character", "CharacterPage"]
