"""The five endpoint checks.

Each check issues its own request, inspects the response, and returns
either the lines to report on success or a single failure. Checks never
raise for a failed expectation.
"""

from pydantic import ValidationError
from result import Err, Ok, Result

from disney_smoke.failures import (
    EMPTY_DATA_ARRAY_MESSAGE,
    AssertionFailure,
    CheckFailure,
    ShapeMismatch,
)
from disney_smoke.schemas.character import Character, CharacterPage
from disney_smoke.services.character_api import CharacterApiClient
from disney_smoke.utils.logging import get_logger

logger = get_logger(__name__)

CheckOutcome = Result[list[str], CheckFailure]


def _parse_characters(
    page: CharacterPage,
) -> Result[list[Character | None], ShapeMismatch]:
    try:
        return Ok(page.characters())
    except ValidationError as e:
        logger.debug(f"Character record failed validation: {e}")
        return Err(ShapeMismatch(f"Response contains a malformed character: {e}"))


async def check_status_code(client: CharacterApiClient) -> CheckOutcome:
    """The base URL answers with the expected status code."""
    expected = client.settings.expected_status_code

    fetched = await client.fetch_status(client.base_url)
    if fetched.is_err():
        return Err(fetched.unwrap_err())

    status = fetched.unwrap()
    if status != expected:
        return Err(
            AssertionFailure(
                description="status code",
                expected=expected,
                actual=status,
                detail=f"Expected status code {expected}, but got {status}",
            )
        )

    return Ok([f"Status code is {status}"])


async def check_data_shape(client: CharacterApiClient) -> CheckOutcome:
    """The body carries a non-empty `data` array."""
    fetched = await client.fetch_page(client.base_url)
    if fetched.is_err():
        return Err(fetched.unwrap_err())

    page = fetched.unwrap()
    if not page.data:
        return Err(ShapeMismatch(EMPTY_DATA_ARRAY_MESSAGE))

    return Ok(
        [
            "Response 'data' property is an array",
            "Data array is not empty",
        ]
    )


async def check_names_present(client: CharacterApiClient) -> CheckOutcome:
    """Every character on the first page has a non-empty name."""
    fetched = await client.fetch_page(client.base_url)
    if fetched.is_err():
        return Err(fetched.unwrap_err())

    parsed = _parse_characters(fetched.unwrap())
    if parsed.is_err():
        return Err(parsed.unwrap_err())

    nameless = sum(
        1 for character in parsed.unwrap() if character is None or not character.name
    )
    if nameless:
        logger.debug(f"{nameless} character(s) without a name")
        return Err(
            AssertionFailure(
                description="characters without a name",
                expected=0,
                actual=nameless,
                detail="Some characters are missing a 'name' property.",
            )
        )

    return Ok(["All characters have a 'name' property"])


async def check_specific_character(client: CharacterApiClient) -> CheckOutcome:
    """A name-filtered query returns the target character."""
    target = client.settings.target_character_name

    fetched = await client.fetch_page(client.name_query_url(target))
    if fetched.is_err():
        return Err(fetched.unwrap_err())

    parsed = _parse_characters(fetched.unwrap())
    if parsed.is_err():
        return Err(parsed.unwrap_err())

    if any(
        character is not None and character.name == target
        for character in parsed.unwrap()
    ):
        return Ok([f"'{target}' character found."])

    return Err(
        AssertionFailure(
            description="character lookup",
            expected=target,
            actual=None,
            detail=f"'{target}' character not found.",
        )
    )


async def check_page_size(client: CharacterApiClient) -> CheckOutcome:
    """The first page holds exactly the default page size.

    Only page one is inspected; `nextPage` is never followed.
    """
    expected = client.settings.default_page_size

    fetched = await client.fetch_page(client.base_url)
    if fetched.is_err():
        return Err(fetched.unwrap_err())

    actual = len(fetched.unwrap().data)
    if actual != expected:
        return Err(
            AssertionFailure(
                description="page size",
                expected=expected,
                actual=actual,
                detail=f"Expected {expected} items per page, but got {actual}",
            )
        )

    return Ok(
        [f"Pagination returns the correct number of items per page ({expected})."]
    )
