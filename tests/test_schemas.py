"""Tests for character response schemas."""

import pytest
from pydantic import ValidationError


class TestCharacterPage:
    """Tests for CharacterPage parsing."""

    def test_parses_full_page(self, full_page: dict):
        """A full page should keep data and pagination cursors."""
        from disney_smoke.schemas.character import CharacterPage

        page = CharacterPage.model_validate(full_page)

        assert len(page.data) == 50
        assert page.count == 50
        assert page.totalPages == 149
        assert page.nextPage is not None
        assert page.previousPage is None

    def test_pagination_fields_are_optional(self):
        """Only data is required."""
        from disney_smoke.schemas.character import CharacterPage

        page = CharacterPage.model_validate({"data": []})

        assert page.data == []
        assert page.count is None
        assert page.nextPage is None

    @pytest.mark.parametrize("body", [{}, {"data": None}, {"data": "x"}, {"data": {}}])
    def test_rejects_missing_or_non_list_data(self, body):
        """data must be present and a list."""
        from disney_smoke.schemas.character import CharacterPage

        with pytest.raises(ValidationError):
            CharacterPage.model_validate(body)

    def test_characters_maps_non_objects_to_none(self):
        """Entries that are not objects should come back as None."""
        from disney_smoke.schemas.character import CharacterPage

        page = CharacterPage.model_validate(
            {"data": [{"_id": 1, "name": "Goofy", "films": ["A Goofy Movie"]}, None]}
        )
        characters = page.characters()

        assert characters[0].id == 1
        assert characters[0].name == "Goofy"
        assert characters[1] is None

    def test_character_without_name(self):
        """A character may be parsed without a name."""
        from disney_smoke.schemas.character import Character

        assert Character.model_validate({}).name is None


class TestUnvalidatedFields:
    """Only data and name are type-checked."""

    def test_page_accepts_any_pagination_types(self):
        """Pagination fields of any type should be carried as-is."""
        from disney_smoke.schemas.character import CharacterPage

        page = CharacterPage.model_validate(
            {"data": [], "count": "50", "totalPages": 1.5, "nextPage": 2,
             "previousPage": {"page": 0}}
        )

        assert page.count == "50"
        assert page.nextPage == 2
        assert page.previousPage == {"page": 0}

    def test_character_accepts_any_id_and_url(self):
        """_id and url of any type should be carried as-is."""
        from disney_smoke.schemas.character import Character

        character = Character.model_validate(
            {"_id": "64a1f0c2e5", "name": "Mickey Mouse", "url": 7}
        )

        assert character.id == "64a1f0c2e5"
        assert character.url == 7
        assert character.name == "Mickey Mouse"

    def test_films_and_tv_shows_kept_as_extra(self):
        """Unknown fields such as films should be kept as extra data."""
        from disney_smoke.schemas.character import Character

        character = Character.model_validate(
            {"name": "Goofy", "films": ["A Goofy Movie"], "tvShows": "Goof Troop"}
        )

        assert character.model_extra == {
            "films": ["A Goofy Movie"],
            "tvShows": "Goof Troop",
        }
