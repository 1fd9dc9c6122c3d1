from pagecraft.domain.exceptions import InvariantViolation
from .section import assert_section


def assert_section_orders(orders):
    expected = list(range(1, len(orders) + 1))

    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Section orders are not consecutive starting from 1: {orders}"
        )


def assert_page(page_document):
    sections = page_document.get("sections") or []

    assert_section_orders([section["order"] for section in sections])

    for section in sections:
        assert_section(section)
