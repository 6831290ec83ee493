"""Theme and language models."""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BACKGROUND = "FFFFFF"
DEFAULT_ACCENT = "2E75B6"
DEFAULT_FONT_COLOR = "333333"


class Theme(BaseModel):
    """Resolved colors shared by every page of one deck."""

    model_config = ConfigDict(frozen=True)

    background: str = Field(default=DEFAULT_BACKGROUND, description="Page background color")
    accent: str = Field(default=DEFAULT_ACCENT, description="Title and heading color")
    font_color: str = Field(default=DEFAULT_FONT_COLOR, description="Body text color")


class Language(str, Enum):
    """Output language; selects locale-dependent labels and prompt wording."""

    CHINESE = "中文"
    ENGLISH = "English"
    JAPANESE = "日本語"

    @classmethod
    def parse(cls, value: Any) -> "Language":
        """Map a language tag to a Language, falling back to Chinese."""
        if isinstance(value, Language):
            return value
        if isinstance(value, str):
            key = value.strip()
            for language in cls:
                if key == language.value or key.lower() == language.name.lower():
                    return language
        return cls.CHINESE

    @property
    def labels(self) -> "LocaleLabels":
        return LOCALE_LABELS[self]


class LocaleLabels(BaseModel):
    """Display strings for the boilerplate parts of a deck."""

    model_config = ConfigDict(frozen=True)

    contents: str
    closing: str
    cover_placeholder: str
    transition_placeholder: str
    instruction: str


LOCALE_LABELS = {
    Language.CHINESE: LocaleLabels(
        contents="目录",
        closing="谢谢聆听",
        cover_placeholder="标题",
        transition_placeholder="章节",
        instruction="请用中文",
    ),
    Language.ENGLISH: LocaleLabels(
        contents="Contents",
        closing="Thank you",
        cover_placeholder="Title",
        transition_placeholder="Part",
        instruction="Please respond in English",
    ),
    Language.JAPANESE: LocaleLabels(
        contents="目次",
        closing="ご清聴ありがとうございました",
        cover_placeholder="タイトル",
        transition_placeholder="章",
        instruction="日本語で答えてください",
    ),
}
