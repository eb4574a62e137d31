"""
regwatch/prompts.py
RegWatch — Prompt templates for the refresh flow.
"""

SYSTEM = (
    "You are a regulatory intelligence analyst tracking EU AI and privacy "
    "regulation for product teams. Answer with JSON only: no prose, no "
    "markdown fences."
)

SEARCH_PROMPT = (
    "Latest EU AI regulation news and enforcement actions (last 3 months). "
    "Focus on major fines or new laws. Return the findings as a JSON array of "
    "objects with date, title, source, summary and url."
)

PROCESSING_TEMPLATE = """Current Date: {date_string}.
Task: Update ALL content to reflect the status as of today.

CRITICAL INSTRUCTION FOR EXECUTIVE SUMMARY:
- Target Audience: Product Managers and Executives (Non-technical, Non-legal).
- Tone: Actionable, Specific, and Business-Oriented.
- RULE 1: NO VAGUE PRONOUNS OR REFERENCES.
  - BAD: "Recent enforcement actions highlight the importance of data governance." (Which actions?)
  - GOOD: "The €20M fine against Clearview AI highlights the strict ban on scraping biometric data."
  - BAD: "Companies should prepare for the upcoming deadline." (Which deadline?)
  - GOOD: "Companies must update technical documentation by August 2, 2026, to comply with the AI Act."
- RULE 2: EXPLAIN IMPACT. Tell them WHAT to do or WHY it matters.
- RULE 3: AVOID JARGON. Use terms PMs understand (e.g., "user consent", "feature rollback", "documentation update") rather than legal citations alone.

CRITICAL INSTRUCTION FOR LINKS:
- All URLs, especially in 'relatedEvents', MUST be specific deep links to the actual article, press release, or document.
- DO NOT use generic homepages (e.g., "https://www.reuters.com/" is BAD; "https://www.reuters.com/technology/article-123" is GOOD).

Based on the search results:
1. Generate new update items for any recent events (last 3 months).
2. Completely REGENERATE the Risk Assessment Report to reflect the status as of {date_string}.
3. Identify the current TOP 3 Critical Compliance Areas.
4. If any knowledge base entry ("Draft" or "Proposal") has changed status, list the corrected entries under "updatedKnowledgeBaseItems". Otherwise return an empty list.

Output JSON structure:
{{
  "newUpdates": [
    {{
      "id": "string",
      "date": "YYYY-MM-DD",
      "title": {{ "en": "string", "cn": "string" }},
      "source": "string",
      "content": {{ "en": "string", "cn": "string" }},
      "analysis": {{ "en": "string", "cn": "string" }},
      "parties": [ {{ "name": "string", "type": "Regulator/Company/Product" }} ],
      "url": "string"
    }}
  ],
  "riskReport": {{
    "lastUpdated": "{iso_date}",
    "score": "Low/Medium/High",
    "summary": {{ "en": ["Point 1", "Point 2", "Point 3"], "cn": ["Point 1", "Point 2", "Point 3"] }},
    "focusAreas": [
       {{
         "name": {{ "en": "string", "cn": "string" }},
         "summary": {{ "en": "string", "cn": "string" }},
         "citation": "string",
         "relatedEvents": [{{ "title": {{ "en": "string", "cn": "string" }}, "url": "string" }}]
       }}
    ]
  }},
  "updatedKnowledgeBaseItems": [
    {{
      "id": "string (existing ID if updating, or new)",
      "title": {{ "en": "string", "cn": "string" }},
      "type": "Legislation/Guidance/Standard",
      "jurisdiction": {{ "en": "string", "cn": "string" }},
      "date": "YYYY-MM-DD",
      "summary": {{ "en": "string", "cn": "string" }},
      "url": "string"
    }}
  ]
}}
"""


def long_date(d):
    """February 21, 2026"""
    return f"{d:%B} {d.day}, {d.year}"


def build_processing_prompt(today):
    return PROCESSING_TEMPLATE.format(date_string=long_date(today), iso_date=today.isoformat())
