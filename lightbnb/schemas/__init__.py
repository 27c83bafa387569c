from .property_search import FilterCriteria
from .property import PropertyCreate
from .user import UserCreate

__all__ = ["FilterCriteria", "PropertyCreate", "UserCreate"]
