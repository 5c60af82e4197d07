"""
Selection state transitions.

A selection is a plain dict of {attribute_name: value}. Transitions are
reducer-style: they return a new dict and never touch the one passed in, so
the same functions back an immutable UI store or a mutable session object.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Optional

from apps.variants.utils import normalize_value

logger = logging.getLogger(__name__)


def _find_option(options, name):
    for option in options:
        if option.name == name:
            return option
    return None


def _as_dict(selection) -> Dict[str, str]:
    if isinstance(selection, Mapping):
        return dict(selection)
    return {}


def select_attribute(selection, name, value, options=None):
    """
    Set `name -> value` on a selection.

    Other attributes are kept; changing the color does not clear the size.
    A combination that matches no variant is still a legal selection (the UI
    shows it as unavailable).

    Args:
        selection: Current {attribute_name: value} mapping (may be None)
        name: Attribute being chosen
        value: Chosen value; coerced to str
        options: Optional AttributeOption list. When given, values the
            catalog does not offer are rejected and `selection` is returned
            unchanged.

    Returns:
        A new dict, or `selection` itself when nothing changes
    """
    value = normalize_value(value)
    if value is None or name is None:
        return selection if selection is not None else {}

    if isinstance(selection, Mapping) and selection.get(name) == value:
        return selection

    if options is not None:
        option = _find_option(options, name)
        if option is None or not option.has_value(value):
            logger.debug("Ignoring selection %s=%r: not offered by catalog", name, value)
            return selection if selection is not None else {}

    new_selection = _as_dict(selection)
    new_selection[name] = value
    return new_selection


def clear_attribute(selection, name):
    """Drop `name` from a selection; returns `selection` itself if absent."""
    if not isinstance(selection, Mapping) or name not in selection:
        return selection if selection is not None else {}
    new_selection = _as_dict(selection)
    del new_selection[name]
    return new_selection


def seed_selection(seed, options) -> Dict[str, str]:
    """
    Initial selection from an externally supplied default or previous choice.
    Pairs the catalog does not offer are discarded.
    """
    selection = {}
    if not isinstance(seed, Mapping):
        return selection
    for name, value in seed.items():
        selection = select_attribute(selection, name, value, options=options)
    return selection


def get_selected_value(selection, name) -> Optional[str]:
    if not isinstance(selection, Mapping):
        return None
    return normalize_value(selection.get(name))
