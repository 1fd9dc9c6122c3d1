import json

from pagecraft.domain.sections.registry import editing_context

CONTENT_SYSTEM_PROMPT = """You help edit landing page sections based on user feedback.

You regenerate ONLY the given section's content.

## Guidelines
- Preserve the overall structure but modify the content as requested
- Keep the same section type
- Maintain brand consistency with the existing content
- Write plain text: never use HTML tags or markdown in any field
- If a request is impossible within the section type, explain what you can do instead and return the content unchanged"""


def build_content_prompt(section_type, current_content, comment: str, business_context=None) -> str:
    context = ""
    if business_context:
        context = f"## Business\n{json.dumps(business_context, indent=2)}\n\n"

    return f"""{editing_context(section_type)}

{context}## Current Content
{json.dumps(current_content, indent=2)}

## User Request
{comment}

## Response Format
Return ONLY valid JSON:
{{
  "explanation": "Brief explanation of what you changed (1-2 sentences)",
  "updatedContent": {{ ...the complete updated content... }}
}}

Return ONLY valid JSON, no markdown code blocks or other text."""
