# app/state - Session state management
from .session import (
    ViewOptions,
    get_formula,
    set_formula,
    get_molecule,
    set_molecule,
    clear_molecule,
    get_error,
    set_error,
    get_view_options,
    update_view_options,
    get_hovered_atom,
    set_hovered_atom,
    get_request_gate,
    clear_all,
)

__all__ = [
    'ViewOptions',
    'get_formula',
    'set_formula',
    'get_molecule',
    'set_molecule',
    'clear_molecule',
    'get_error',
    'set_error',
    'get_view_options',
    'update_view_options',
    'get_hovered_atom',
    'set_hovered_atom',
    'get_request_gate',
    'clear_all',
]
