from cardthemes.models.card import (
    CardId,
    SpecialCard,
    Suit,
    card_id,
    describe_card,
    is_joker,
    split_card_id,
)
from cardthemes.models.cardset import (
    CardsetDescriptor,
    CardsetType,
    CardSize,
    create_cardset_descriptor,
)
from cardthemes.models.failure import (
    AssetUnavailable,
    CardsetParseError,
    FailureDetail,
    FailureKind,
    KnownError,
)
from cardthemes.models.theme import CardThemeInfo, ThemeFormat, build_pysol_theme_info

__all__ = [
    "AssetUnavailable",
    "CardId",
    "CardSize",
    "CardThemeInfo",
    "CardsetDescriptor",
    "CardsetParseError",
    "CardsetType",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "SpecialCard",
    "Suit",
    "ThemeFormat",
    "build_pysol_theme_info",
    "card_id",
    "create_cardset_descriptor",
    "describe_card",
    "is_joker",
    "split_card_id",
]
