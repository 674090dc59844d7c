"""Utility for deciding whether a resolved type is a UI control."""

from name_generator.known_names import CONTROL_INTERFACE
from name_generator.markup_nodes import TypeDescriptor


def is_control(clr_type: TypeDescriptor | None) -> bool:
    """Check whether the type implements the control marker interface."""
    if clr_type is None:
        return False
    return any(
        iface.is_interface and iface.full_name == CONTROL_INTERFACE
        for iface in clr_type.interfaces
    )
