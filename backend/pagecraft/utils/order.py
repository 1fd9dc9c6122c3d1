from pagecraft.extensions import db


def compact_order(items, order_field="order"):
    """
    Re-assigns sequential order values (1..N), keeping the current relative order.
    """
    ordered = sorted(items, key=lambda item: getattr(item, order_field))

    for index, item in enumerate(ordered, start=1):
        setattr(item, order_field, index)

    db.session.flush()
    return ordered


def apply_order(items, ordered_ids, order_field="order"):
    """
    Assigns 1..N following ordered_ids, which must name every item exactly once.
    """
    by_id = {item.id: item for item in items}

    if len(ordered_ids) != len(set(ordered_ids)) or set(ordered_ids) != set(by_id):
        raise ValueError("Order must list every section of the page exactly once")

    for index, item_id in enumerate(ordered_ids, start=1):
        setattr(by_id[item_id], order_field, index)

    db.session.flush()
    return [by_id[item_id] for item_id in ordered_ids]
