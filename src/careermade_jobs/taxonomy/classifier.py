"""Keyword-based taxonomy classification of job postings.

Each rank is resolved by an ordered chain of :class:`KeywordRule` entries:
the first rule with a keyword contained in the posting text wins, otherwise
the rank falls back to ``"Other"``. Order encodes precedence, so specific
medical roles are listed before generic administrative ones.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from careermade_jobs.core.models import ClassificationResult, Posting
from careermade_jobs.taxonomy.registry import (
    MEDICAL_DEPARTMENTS,
    OTHER,
    TaxonomyRegistry,
    default_registry,
)
from careermade_jobs.utils.logging import get_logger

logger = get_logger(__name__)


class MatchScope(Enum):
    """Which part of a posting a rule reads."""
    TITLE = "title"
    SPECIALIZATION = "specialization"
    COMBINED = "combined"


@dataclass(frozen=True)
class PostingText:
    """Lower-cased, trimmed text fields used for keyword matching."""
    title: str
    specialization: str

    @classmethod
    def of(cls, posting: Posting) -> "PostingText":
        return cls(
            title=_normalize(posting.title),
            specialization=_normalize(posting.specialization_text),
        )

    @property
    def combined(self) -> str:
        return f"{self.title} {self.specialization}"

    def scoped(self, scope: MatchScope) -> str:
        if scope is MatchScope.TITLE:
            return self.title
        if scope is MatchScope.SPECIALIZATION:
            return self.specialization
        return self.combined


@dataclass(frozen=True)
class KeywordRule:
    """Resolve to ``label`` when any keyword appears in the scoped text."""
    label: str
    keywords: Tuple[str, ...]
    scope: MatchScope = MatchScope.COMBINED

    def matches(self, text: PostingText) -> bool:
        haystack = text.scoped(self.scope)
        return any(keyword in haystack for keyword in self.keywords)


CATEGORY_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule(
        "Doctor",
        (
            "doctor", "dr.", "consultant", "surgeon", "physician",
            "medical officer", "resident", "registrar", "rmo",
        ),
    ),
    KeywordRule("Doctor", MEDICAL_DEPARTMENTS, MatchScope.SPECIALIZATION),
    KeywordRule("Nurse", ("nurse", "nursing", "anm", "gnm")),
    KeywordRule(
        "Technician",
        (
            "technician", "technologist", "lab tech", "x-ray", "radiology tech",
            "ct", "mri", "dialysis", "cath lab", "ot tech",
        ),
    ),
    KeywordRule("Pharmacy", ("pharmacist", "pharmacy")),
    KeywordRule("Support", ("assistant", "housekeeping", "security", "ward", "attendant")),
    KeywordRule("Admin", ("admin", "administrator", "hr", "human resources", "operations", "finance", "billing")),
    KeywordRule("Insurance", ("insurance", "claims", "tpa", "underwriting")),
    KeywordRule("Marketing", ("marketing", "sales", "business development", "brand")),
)

# Most specific role markers first; broad specialist markers last.
DOCTOR_SUBCATEGORY_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule("RMO", ("rmo", "resident medical officer"), MatchScope.TITLE),
    KeywordRule(
        "Medicine officer",
        ("medical officer", "duty medical officer", "casualty medical officer"),
        MatchScope.TITLE,
    ),
    KeywordRule(
        "Super specialist",
        (
            "cardio", "neuro", "nephro", "gastro", "endo", "onco", "uro",
            "critical care", "ctvs", "super specialist", "superspecialist",
        ),
    ),
    KeywordRule(
        "Specialist",
        (
            "specialist", "consultant", "surgeon", "physician", "general medicine",
            "orthopedic", "ent", "ophthal", "derma", "psychiatry", "anesthesia",
            "radiology", "pediatric",
        ),
    ),
)


def _normalize(value: Optional[str]) -> str:
    return (value or "").lower().strip()


def first_matching_rule(rules: Iterable[KeywordRule], text: PostingText, default: str = OTHER) -> str:
    """Return the label of the first rule that matches, else ``default``."""
    for rule in rules:
        if rule.matches(text):
            return rule.label
    return default


def first_option_in_text(options: Sequence[str], text: PostingText) -> str:
    """Return the first non-"Other" option whose label occurs in the title or specialization."""
    for option in options:
        if option == OTHER:
            continue
        key = option.lower()
        if key in text.title or key in text.specialization:
            return option
    return OTHER


def category_of(posting: Posting, registry: TaxonomyRegistry = default_registry) -> str:
    """Infer the top-level category of a posting among the categories ``registry`` declares."""
    rules = [rule for rule in CATEGORY_RULES if registry.is_category(rule.label)]
    return first_matching_rule(rules, PostingText.of(posting))


def subcategory_of(
    posting: Posting,
    category: str,
    registry: TaxonomyRegistry = default_registry,
) -> str:
    """Infer the subcategory of a posting already placed in ``category``."""
    text = PostingText.of(posting)
    options = registry.subcategories_of(category)
    if category == "Doctor":
        return first_matching_rule([rule for rule in DOCTOR_SUBCATEGORY_RULES if rule.label in options], text)
    return first_option_in_text(options, text)


def field_of(
    posting: Posting,
    category: str,
    subcategory: str,
    registry: TaxonomyRegistry = default_registry,
) -> str:
    """Infer the field of a posting already placed in ``(category, subcategory)``."""
    return first_option_in_text(registry.fields_of(category, subcategory), PostingText.of(posting))


def classify(posting: Posting, registry: TaxonomyRegistry = default_registry) -> ClassificationResult:
    """
    Derive the taxonomy path of a posting.

    Total and deterministic: postings with empty text classify as
    ``Other / Other / Other``. The posting is never modified.
    """
    category = category_of(posting, registry)
    subcategory = subcategory_of(posting, category, registry)
    field = field_of(posting, category, subcategory, registry)
    logger.debug(
        "Classified posting",
        posting_id=posting.id,
        category=category,
        subcategory=subcategory,
        field=field,
    )
    return ClassificationResult(category=category, subcategory=subcategory, field=field)
