"""
regwatch/schemas.py
RegWatch — Record shapes
Every record the dashboard stores or receives from the AI service.
Wire format is camelCase JSON; attributes are snake_case.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PARTY_TYPES = ("Regulator", "Company", "Product", "Other")


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self):
        """Dump with wire keys, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ── shared pieces ─────────────────────────────────────────────────────────────

class LocalizedString(Record):
    en: str
    cn: str = ""


class LocalizedList(Record):
    en: List[str] = Field(default_factory=list)
    cn: List[str] = Field(default_factory=list)


class CustomLink(Record):
    name: str
    url: str


class Party(Record):
    name: str
    type: str = "Other"

    @field_validator("type", mode="before")
    @classmethod
    def _known_type(cls, v):
        # The model sometimes echoes the prompt's "Regulator/Company/Product"
        return v if v in PARTY_TYPES else "Other"


# ── knowledge base ────────────────────────────────────────────────────────────

class KnowledgeItem(Record):
    id: str
    title: LocalizedString
    type: str
    jurisdiction: LocalizedString
    date: str
    summary: LocalizedString
    url: Optional[str] = None
    note: Optional[str] = None
    custom_links: Optional[List[CustomLink]] = None


# ── updates feed ──────────────────────────────────────────────────────────────

class UpdateItem(Record):
    id: str
    date: str
    title: LocalizedString
    source: str
    content: LocalizedString
    analysis: LocalizedString
    parties: List[Party] = Field(default_factory=list)
    url: Optional[str] = None
    note: Optional[str] = None
    custom_links: Optional[List[CustomLink]] = None


# ── risk report ───────────────────────────────────────────────────────────────

class StatItem(Record):
    label: LocalizedString
    count: int = 0
    trend: Literal["up", "down", "stable"] = "stable"


class ReportStats(Record):
    legislation: StatItem
    enforcement: StatItem


class RelatedEvent(Record):
    title: LocalizedString
    url: Optional[str] = None


class FocusArea(Record):
    name: LocalizedString
    summary: LocalizedString
    citation: Optional[str] = None
    related_events: Optional[List[RelatedEvent]] = None
    note: Optional[str] = None
    custom_links: Optional[List[CustomLink]] = None


class RiskReport(Record):
    last_updated: str
    score: str
    summary: LocalizedList
    stats: ReportStats
    focus_areas: List[FocusArea] = Field(default_factory=list)
    archived_focus_areas: Optional[List[FocusArea]] = None


# ── AI refresh payload ────────────────────────────────────────────────────────

class GeneratedReport(Record):
    """The slice of the risk report the AI regenerates on every refresh."""
    last_updated: str
    score: str
    summary: LocalizedList
    focus_areas: List[FocusArea] = Field(default_factory=list)


class RefreshPayload(Record):
    new_updates: List[UpdateItem] = Field(default_factory=list)
    risk_report: GeneratedReport
    updated_knowledge_base_items: List[KnowledgeItem] = Field(default_factory=list)
