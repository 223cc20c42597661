from typing import Any


def apply_dict_updates(entity: object, update_data: dict[str, Any], excluded_attrs: set[str] | None) -> list[str]:
    """
    Dynamically applies key-value pairs from a dictionary to an ORM entity.

    Args:
        entity: The SQLAlchemy ORM object loaded into the session.
        update_data: Dictionary of fields and values to update.
        excluded_attrs: Attribute names to explicitly ignore (e.g., immutable keys).

    Returns:
        The attribute names that were actually written.
    """
    excluded_attrs = excluded_attrs if excluded_attrs else set()
    applied: list[str] = []
    for key, value in update_data.items():

        if key in excluded_attrs:
            continue

        if hasattr(entity, key):
            setattr(entity, key, value)
            applied.append(key)

    return applied
