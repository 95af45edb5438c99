"""Tests for the explicit input checks."""

import pytest

from mediashelf.core.exceptions import UnauthenticatedError, ValidationError
from mediashelf.core.validation import (
    require_caller,
    validate_credentials,
    validate_item_fields,
    validate_playlist_fields,
)


class TestPlaylistFields:

    def test_name_and_description_are_trimmed(self):
        assert validate_playlist_fields("  Favorites ", " weekend ") == ("Favorites", "weekend")

    def test_description_is_optional(self):
        assert validate_playlist_fields("Favorites", None) == ("Favorites", None)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            validate_playlist_fields(name, "x")


class TestItemFields:

    def test_valid_item(self):
        assert validate_item_fields("tt001", "Movie A", None, "tv") == ("tt001", "Movie A", None, "tv")

    def test_media_id_kept_verbatim(self):
        media_id, _, _, _ = validate_item_fields(" tt001", "Movie A", None, "movie")
        assert media_id == " tt001"

    def test_empty_poster_becomes_none(self):
        _, _, poster, _ = validate_item_fields("tt001", "Movie A", "", "movie")
        assert poster is None

    @pytest.mark.parametrize("media_type", ["episode", "Movie", "podcast"])
    def test_unknown_media_type_rejected(self, media_type):
        with pytest.raises(ValidationError, match="mediaType must be one of"):
            validate_item_fields("tt001", "Movie A", None, media_type)

    @pytest.mark.parametrize(
        "fields,missing",
        [
            ((None, "Movie A", None, "movie"), "mediaId"),
            (("tt001", "", None, "movie"), "title"),
            (("tt001", "Movie A", None, None), "mediaType"),
        ],
    )
    def test_required_fields(self, fields, missing):
        with pytest.raises(ValidationError, match=f"{missing} is required"):
            validate_item_fields(*fields)


class TestCredentialsAndCaller:

    def test_password_not_trimmed(self):
        assert validate_credentials("alice", " pw ") == ("alice", " pw ")

    @pytest.mark.parametrize("username,password", [("", "pw"), ("alice", ""), (None, None), ("  ", "pw")])
    def test_blank_credentials_rejected(self, username, password):
        with pytest.raises(ValidationError):
            validate_credentials(username, password)

    def test_nul_in_password_rejected(self):
        with pytest.raises(ValidationError, match="NUL"):
            validate_credentials("alice", "pw\x00x")

    @pytest.mark.parametrize("caller", [None, ""])
    def test_missing_caller(self, caller):
        with pytest.raises(UnauthenticatedError):
            require_caller(caller)
