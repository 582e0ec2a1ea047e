"""
Tests for the language profile table.
"""

import pytest
from pydantic import ValidationError

from linguatutor.tutor.languages import (
    DEFAULT_LANGUAGE,
    LANGUAGE_PROFILES,
    SupportedLanguage,
    get_profile,
    list_supported_languages,
)


class TestProfileTable:

    def test_every_language_has_a_profile(self):
        assert set(LANGUAGE_PROFILES) == set(SupportedLanguage)

    def test_seven_languages(self):
        assert len(SupportedLanguage) == 7

    def test_default_is_english(self):
        assert DEFAULT_LANGUAGE is SupportedLanguage.ENGLISH

    @pytest.mark.parametrize("language", list(SupportedLanguage))
    def test_profiles_are_complete(self, language):
        profile = LANGUAGE_PROFILES[language]
        for field, value in profile.model_dump().items():
            assert value, f"{language.value}.{field} is empty"

    def test_profiles_are_distinct(self):
        descriptions = {p.tutor_description for p in LANGUAGE_PROFILES.values()}
        assert len(descriptions) == len(SupportedLanguage)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            LANGUAGE_PROFILES[SupportedLanguage.ENGLISH] = LANGUAGE_PROFILES[SupportedLanguage.GERMAN]

    def test_profile_is_frozen(self):
        with pytest.raises(ValidationError):
            LANGUAGE_PROFILES[SupportedLanguage.ENGLISH].name = "Klingon"


class TestGetProfile:

    def test_accepts_enum(self):
        assert get_profile(SupportedLanguage.JAPANESE).native_name == "日本語"

    def test_accepts_string_value(self):
        assert get_profile("korean").name == "Korean"

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError):
            get_profile("klingon")


class TestListSupportedLanguages:

    def test_codes_in_enum_order(self):
        codes = [entry["code"] for entry in list_supported_languages()]
        assert codes == [
            "english", "japanese", "korean", "chinese", "french", "german", "spanish",
        ]

    def test_entries_carry_names(self):
        french = next(e for e in list_supported_languages() if e["code"] == "french")
        assert french == {"code": "french", "name": "French", "nativeName": "Français"}
