from .add_contact import AddContactUseCase
from .search_contacts import SearchContactsUseCase

__all__ = ["AddContactUseCase", "SearchContactsUseCase"]
