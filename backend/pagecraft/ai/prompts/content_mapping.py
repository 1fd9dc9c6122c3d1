import json

from pagecraft.domain.sections.registry import describe
from pagecraft.domain.templates import registry as templates

MAPPING_SYSTEM_PROMPT = (
    "You are a content mapping assistant. When a landing page section switches "
    "to a template of a different section type, you carry its content over to "
    "the destination schema."
)


def build_mapping_prompt(source_template_id: str, dest_template_id: str, current_content) -> str:
    destination = templates.get_definition(dest_template_id)
    schema = json.dumps(describe(destination.section_type), indent=2)

    return f"""## Source Template
ID: {source_template_id}

## Destination Template
ID: {dest_template_id}
Section type: {destination.section_type.value}

## Destination Content Schema
```json
{schema}
```

## Current Content
{json.dumps(current_content, indent=2)}

## Instructions
1. Map fields that exist in both shapes directly (headline -> headline, cta -> cta)
2. Preserve the user's intent, messaging and tone
3. Generate content for required destination fields that have no source, based on context
4. Omit source fields the destination does not have
5. Respect list sizes the schema declares (minItems / maxItems)
6. Plain text only: no HTML or markdown in any field

## Response Format
Return ONLY valid JSON:
{{
  "mappedContent": {{ ...content matching the destination schema... }},
  "notes": "Brief explanation of any transformations or generated content (optional)"
}}

Return ONLY valid JSON, no markdown code blocks or other text."""
