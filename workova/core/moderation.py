"""
Content moderation gate for user-authored free text.

moderate() is pure and deterministic: no I/O, no state. It runs before job
titles, job descriptions, offer ETAs and offer messages are stored. Rules
mirror the community guidelines (no profanity or harassment, no scams or
spam, no taking payment off the platform, no links, no shouting).
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple


@dataclass(frozen=True)
class ModerationResult:
    """Outcome of a moderation check. reason is set whenever is_clean is False."""

    is_clean: bool
    reason: Optional[str] = None


CLEAN = ModerationResult(is_clean=True)

# Whole-word, case-insensitive
BLOCKED_WORDS = [
    "fuck",
    "fucking",
    "shit",
    "bitch",
    "asshole",
    "bastard",
    "cunt",
    "dick",
    "slut",
    "whore",
    "retard",
    "faggot",
    "nigger",
]

HARASSMENT_PATTERNS = [
    r"\bkill\s+(you|u|yourself)\b",
    r"\bi\s+will\s+hurt\s+you\b",
    r"\bgo\s+die\b",
]

SCAM_PATTERNS = [
    r"\b(buy|sell|invest\s+in|trade)\s+(crypto|bitcoin|btc|eth|ethereum)\b",
    r"\bcrypto(currency|currencies)?\b",
    r"\bbitcoin\b",
    r"\bgift\s*cards?\b",
    r"\bwire\s+transfer\b",
    r"\bwestern\s+union\b",
    r"\bmake\s+money\s+(fast|quick|online)\b",
    r"\bget\s+rich\s+quick\b",
    r"\bguaranteed\s+(income|returns?)\b",
    r"\bclick\s+here\b",
]

OFF_PLATFORM_PATTERNS = [
    r"\bpay(ment)?\s+(me\s+)?outside\b",
    r"\boutside\s+(of\s+)?(the\s+)?app\b",
    r"\b(cash\s*app|venmo|zelle)\b",
    r"\bpaypal\s+me\b",
]

LINK_PATTERN = re.compile(r"(https?://|www\.)\S+", re.IGNORECASE)
SHOUTING_PATTERN = re.compile(r"[!?]{3,}")


def _compile(patterns: List[str]) -> List[Pattern[str]]:
    return [re.compile(p, re.IGNORECASE) for p in patterns]


_BLOCKED_WORD_RE = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in BLOCKED_WORDS) + r")\b",
    re.IGNORECASE,
)

# Checked in order; the first hit decides the reason
RULES: List[Tuple[List[Pattern[str]], str]] = [
    ([_BLOCKED_WORD_RE], "Your text contains offensive language. Please keep it respectful."),
    (_compile(HARASSMENT_PATTERNS), "Threatening or harassing language is not allowed."),
    (_compile(SCAM_PATTERNS), "Your text looks like spam or a scam and can't be posted."),
    (
        _compile(OFF_PLATFORM_PATTERNS),
        "Arranging payment outside the app is not allowed.",
    ),
    ([LINK_PATTERN], "Links are not allowed. Please describe the work in your own words."),
    ([SHOUTING_PATTERN], "Please avoid excessive punctuation."),
]


def moderate(text: Optional[str]) -> ModerationResult:
    """
    Classify free text as clean or rejected.

    Empty text is clean; whether a field may be empty is a validation
    concern of the caller.
    """
    if not text:
        return CLEAN

    for patterns, reason in RULES:
        if any(p.search(text) for p in patterns):
            return ModerationResult(is_clean=False, reason=reason)

    return CLEAN
