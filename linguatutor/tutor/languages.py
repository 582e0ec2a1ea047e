"""
Target-language profiles.

Each supported language has exactly one immutable LanguageProfile holding
the tutor persona, the pronunciation notation the model must use, a fully
worked example answer, and a list of language-specific grammar checks.
The table is built once at import time and exposed read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class SupportedLanguage(str, Enum):
    """Closed set of target languages."""

    ENGLISH = "english"
    JAPANESE = "japanese"
    KOREAN = "korean"
    CHINESE = "chinese"
    FRENCH = "french"
    GERMAN = "german"
    SPANISH = "spanish"


DEFAULT_LANGUAGE = SupportedLanguage.ENGLISH


class LanguageProfile(BaseModel):
    """Prompt parameters for one target language."""

    name: str = Field(description="English display name, e.g. 'Japanese'")
    native_name: str = Field(description="Name in the language itself, e.g. '日本語'")
    tutor_description: str = Field(description="Persona the model adopts")
    pronunciation_system: str = Field(description="Notation used for pronunciation fields")
    pronunciation_example: str
    example_original: str
    example_correction: str
    example_correction_pronunciation: str
    example_explanation: str
    example_reply: str
    example_pronunciation: str
    special_rules: tuple[str, ...] = Field(
        default=(), description="Grammar checks appended after the fixed rules"
    )

    model_config = ConfigDict(frozen=True)


_PROFILES: dict[SupportedLanguage, LanguageProfile] = {
    SupportedLanguage.ENGLISH: LanguageProfile(
        name="English",
        native_name="English",
        tutor_description="a professional British/American English speaking tutor",
        pronunciation_system="IPA (International Phonetic Alphabet) with American English symbols",
        pronunciation_example="/ɡreɪt ˈɛfərt!/",
        example_original="I go to school yesterday",
        example_correction="I went to school yesterday",
        example_correction_pronunciation="/aɪ wɛnt tu skul ˈjɛstərˌdeɪ/",
        example_explanation="We use 'went' (past tense) because 'yesterday' indicates a past time.",
        example_reply=(
            "Great effort! You're talking about the past, so we use 'went' instead of 'go'. "
            "Can you tell me more about what you did at school yesterday?"
        ),
        example_pronunciation="/ɡreɪt ˈɛfərt! jʊr ˈtɔkɪŋ əˈbaʊt ðə pæst/",
        special_rules=(
            "Use primary stress mark ˈ before stressed syllables",
            "Focus on common pronunciation mistakes for non-native speakers",
        ),
    ),
    SupportedLanguage.JAPANESE: LanguageProfile(
        name="Japanese",
        native_name="日本語",
        tutor_description="a professional Japanese language tutor (日本語の先生)",
        pronunciation_system="Romaji with pitch accent markers (High: ꜛ, Low: ꜜ) and Hiragana reading",
        pronunciation_example="すꜛごꜜい (sugoi)",
        example_original="昨日学校に行くました",
        example_correction="昨日学校に行きました",
        example_correction_pronunciation="きꜛのꜜう がꜛっこꜜうに いꜛきまꜜした (kinou gakkou ni ikimashita)",
        example_explanation="「行く」の過去形は「行きました」です。「行くました」は文法的に正しくありません。",
        example_reply="いい調子ですね！過去形の練習をしましょう。昨日、学校で何をしましたか？",
        example_pronunciation="いꜛいꜜ ちょꜛうしꜜ ですꜜね (ii choushi desu ne)",
        special_rules=(
            "Pay attention to particle usage (は, が, を, に, で, etc.)",
            "Check verb conjugation forms (て形, た形, ます形)",
            "Watch for keigo (敬語) politeness levels",
            "Include both Hiragana reading and Romaji for pronunciation",
        ),
    ),
    SupportedLanguage.KOREAN: LanguageProfile(
        name="Korean",
        native_name="한국어",
        tutor_description="a professional Korean language tutor (한국어 선생님)",
        pronunciation_system="Revised Romanization with Hangul",
        pronunciation_example="잘했어요 (jalhaesseoyo)",
        example_original="어제 학교에 가요",
        example_correction="어제 학교에 갔어요",
        example_correction_pronunciation="어제 학교에 갔어요 (eoje hakgyoe gasseoyo)",
        example_explanation="과거를 표현할 때는 '-았/었어요'를 사용합니다. '가요'는 현재형이에요.",
        example_reply="잘하고 있어요! 과거형 연습을 해볼까요? 어제 학교에서 뭐 했어요?",
        example_pronunciation="잘하고 있어요 (jalhago isseoyo)",
        special_rules=(
            "Check for proper honorific levels (존댓말/반말)",
            "Watch for particle usage (은/는, 이/가, 을/를)",
            "Pay attention to verb conjugation (past, present, future)",
            "Note pronunciation changes (연음, 경음화, etc.)",
        ),
    ),
    SupportedLanguage.CHINESE: LanguageProfile(
        name="Chinese",
        native_name="中文",
        tutor_description="a professional Mandarin Chinese tutor (中文老师)",
        pronunciation_system="Pinyin with tone marks (1: ā, 2: á, 3: ǎ, 4: à)",
        pronunciation_example="hěn bàng! (很棒!)",
        example_original="我昨天去学校了",
        example_correction="我昨天去学校了",
        example_correction_pronunciation="wǒ zuótiān qù xuéxiào le",
        example_explanation='这句话是正确的！"了"表示动作完成，用得很好。',
        example_reply="说得很好！你的中文在进步。昨天在学校做了什么？",
        example_pronunciation="shuō de hěn hǎo! nǐ de zhōngwén zài jìnbù.",
        special_rules=(
            "Always include tone marks in Pinyin",
            "Check for measure word (量词) usage",
            "Watch for aspect markers (了, 过, 着)",
            "Pay attention to word order (SVO structure)",
        ),
    ),
    SupportedLanguage.FRENCH: LanguageProfile(
        name="French",
        native_name="Français",
        tutor_description="a professional French language tutor (professeur de français)",
        pronunciation_system="IPA with French phonemes and liaison markers",
        pronunciation_example="/tʁɛ bjɛ̃/ (très bien)",
        example_original="Je suis allé à école hier",
        example_correction="Je suis allé à l'école hier",
        example_correction_pronunciation="/ʒə sɥi‿ale a lekɔl jɛʁ/",
        example_explanation=(
            "On utilise l'article défini contracté \"l'\" devant \"école\" "
            "car le mot commence par une voyelle."
        ),
        example_reply="Très bien ! N'oubliez pas les articles. Qu'avez-vous fait à l'école hier ?",
        example_pronunciation="/tʁɛ bjɛ̃! nublije pa lez‿aʁtikl/",
        special_rules=(
            "Check for gender agreement (le/la, un/une)",
            "Watch for verb conjugation and tense agreement",
            "Note liaisons between words",
            "Pay attention to accent marks (é, è, ê, ë, etc.)",
        ),
    ),
    SupportedLanguage.GERMAN: LanguageProfile(
        name="German",
        native_name="Deutsch",
        tutor_description="a professional German language tutor (Deutschlehrer)",
        pronunciation_system="IPA with German phonemes",
        pronunciation_example="/zeːɐ̯ guːt/ (sehr gut)",
        example_original="Ich bin gestern in die Schule gegangen",
        example_correction="Ich bin gestern in die Schule gegangen",
        example_correction_pronunciation="/ɪç bɪn ˈɡɛstɐn ɪn diː ˈʃuːlə ɡəˈɡaŋən/",
        example_explanation=(
            'Perfekt! Der Satz ist grammatikalisch korrekt. '
            '"Gegangen" ist das Partizip II von "gehen".'
        ),
        example_reply="Sehr gut! Dein Deutsch ist ausgezeichnet. Was hast du gestern in der Schule gemacht?",
        example_pronunciation="/zeːɐ̯ guːt! daɪn dɔʏtʃ ɪst ˈaʊsɡəˌtsaɪçnət/",
        special_rules=(
            "Check for correct case usage (Nominativ, Akkusativ, Dativ, Genitiv)",
            "Watch for verb position in main and subordinate clauses",
            "Pay attention to noun gender (der, die, das)",
            "Note separable prefix verbs",
        ),
    ),
    SupportedLanguage.SPANISH: LanguageProfile(
        name="Spanish",
        native_name="Español",
        tutor_description="a professional Spanish language tutor (profesor de español)",
        pronunciation_system="IPA with Spanish phonemes",
        pronunciation_example="/ˈmui ˈbjen/ (muy bien)",
        example_original="Yo fui a la escuela ayer",
        example_correction="Ayer fui a la escuela",
        example_correction_pronunciation="/aˈʝeɾ fwi a la esˈkwela/",
        example_explanation=(
            "En español, es más natural poner el tiempo al principio. También, el pronombre "
            "\"yo\" es opcional porque el verbo ya indica la persona."
        ),
        example_reply="¡Muy bien! Tu español está mejorando. ¿Qué hiciste en la escuela ayer?",
        example_pronunciation="/ˈmui ˈbjen! tu espaˈɲol esˈta mexoˈɾando/",
        special_rules=(
            "Check for correct verb conjugation (especially irregular verbs)",
            "Watch for ser vs estar usage",
            "Pay attention to gender and number agreement",
            "Note the use of subjunctive mood when appropriate",
        ),
    ),
}

LANGUAGE_PROFILES: Mapping[SupportedLanguage, LanguageProfile] = MappingProxyType(_PROFILES)


def get_profile(language: SupportedLanguage | str) -> LanguageProfile:
    """
    Look up the profile for a language.

    Accepts the enum or its string value. Unknown values raise ValueError;
    rejecting them is the caller's job, so reaching this is a programming error.
    """
    return LANGUAGE_PROFILES[SupportedLanguage(language)]


def list_supported_languages() -> list[dict[str, Any]]:
    """Return the language list exported to clients, in enum order."""
    return [
        {
            "code": language.value,
            "name": LANGUAGE_PROFILES[language].name,
            "nativeName": LANGUAGE_PROFILES[language].native_name,
        }
        for language in SupportedLanguage
    ]
