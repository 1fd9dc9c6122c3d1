import json

from pagecraft.domain.templates.selectors import selectors_for

STYLE_SYSTEM_PROMPT = (
    "You are a styling assistant for landing page sections. "
    "You change Tailwind CSS utility classes and never change copy."
)

EXAMPLES = """User: "Make the text bold"
Response:
{"level": "element", "explanation": "Adding bold font weight to the headline.", "styleOverrides": {"elements": {"headline": "font-bold"}}}

User: "Make the headline bigger and bolder"
Response:
{"level": "element", "explanation": "Increasing headline size and weight for more impact.", "styleOverrides": {"elements": {"headline": "text-6xl md:text-8xl font-black"}}}

User: "Add more spacing throughout the section"
Response:
{"level": "both", "explanation": "Increasing section padding and spacing between elements.", "styleOverrides": {"section": "py-32 space-y-12", "elements": {"headline": "mb-8", "subheadline": "mb-12"}}}

User: "Make the buttons rounded and add a shadow"
Response:
{"level": "element", "explanation": "Adding rounded corners and a shadow to the CTA button.", "styleOverrides": {"elements": {"cta.button": "rounded-full shadow-xl hover:shadow-2xl transition-shadow"}}}

User: "Add a fade-in animation to the section"
Response:
{"level": "section", "explanation": "Adding a fade-in animation to the section container.", "styleOverrides": {"section": "animate-fade-in"}}"""


def build_style_prompt(section_type, current_overrides, comment: str) -> str:
    selectors = "\n".join(f"- {s}" for s in selectors_for(section_type))
    current = json.dumps(current_overrides or {}, indent=2)

    return f"""You modify Tailwind CSS classes of a landing page section based on a user request.

## Levels
1. Section-level: the section container (background, padding, spacing, animation)
2. Element-level: specific elements, addressed by selector

## Available Element Selectors for {section_type} Section
{selectors}

Use "[index]" for one item of a list (for example "features[0].title") or the "[*]" form for all items.

## Tailwind Classes You Can Use
- Spacing: p-*, py-*, px-*, m-*, my-*, mx-*, gap-*, space-y-*, space-x-*
- Typography: text-xs through text-9xl, font-light through font-black, tracking-*, leading-*
- Colors: text-*, bg-* (Tailwind color names such as blue-500, gray-900)
- Layout: flex, grid, items-*, justify-*, grid-cols-*, flex-col, flex-row
- Effects: shadow-*, rounded-*, opacity-*, blur-*, backdrop-blur-*
- Animations: animate-*, transition-*, duration-*, ease-*
- Transforms: scale-*, rotate-*, translate-*
- Borders: border-*, border-t-*, ring-*

Values are space-separated class names. Never return CSS declarations, numbers or nested objects as values.

## Current Style Overrides
{current}

## Response Format
Return ONLY valid JSON:
{{
  "level": "section" | "element" | "both",
  "explanation": "Brief explanation of the changes (1-2 sentences)",
  "styleOverrides": {{
    "section": "classes for the section container (optional)",
    "elements": {{"selector": "classes to apply"}}
  }}
}}

## Examples
{EXAMPLES}

## User Request
{comment}

Return ONLY valid JSON, no markdown code blocks or other text."""
