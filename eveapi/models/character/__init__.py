from eveapi.models.character.character_info import CharacterInfo

__all__ = ["CharacterInfo"]
