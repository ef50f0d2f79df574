"""Linked-list sorts that report each swap, value formatting and card-deck sorting."""

__version__ = "0.1.0"
__all__ = ["deck", "linked", "list_sorts", "reporting"]