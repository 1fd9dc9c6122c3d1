from pagecraft.domain.exceptions import InvariantViolation
from pagecraft.domain.sections.registry import validate, validate_variants
from pagecraft.domain.sections.types import is_valid_type
from pagecraft.domain.styles import overrides as styles
from pagecraft.domain.templates import registry as templates


def assert_section_template(section_type, template_id):
    metadata = templates.get(template_id)

    if metadata is None:
        raise InvariantViolation(f"Section references unknown template {template_id!r}.")

    if metadata.section_type.value != str(section_type):
        raise InvariantViolation(
            f"Template {template_id!r} renders {metadata.section_type.value!r} sections, "
            f"not {str(section_type)!r}."
        )


def assert_section(section):
    """
    Checks a complete section document before it is written.
    Content, variants and style overrides must all match the section type.
    """
    section_type = section.get("type")

    if not is_valid_type(section_type):
        raise InvariantViolation(f"Unknown section type {section_type!r}.")

    assert_section_template(section_type, section.get("template_id"))

    validate(section_type, section.get("content"))

    variants = section.get("variants") or []
    validate_variants(section_type, variants)

    selected = section.get("selected_variant")
    if selected is not None and not 0 <= selected < len(variants):
        raise InvariantViolation(
            f"Selected variant {selected} is out of range for {len(variants)} variant(s)."
        )

    overrides = section.get("style_overrides")
    if overrides:
        result = styles.validate(overrides)
        if not result.valid:
            raise InvariantViolation(
                "Invalid style overrides: " + "; ".join(result.errors)
            )
