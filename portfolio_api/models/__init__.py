# Database models package

from .base import Base
from .admin import Admin
from .blog import Blog
from .cv import CV
from .hobby import Hobby
from .category import Category
from .quote import Quote

__all__ = [
    'Base',
    'Admin',
    'Blog',
    'CV',
    'Hobby',
    'Category',
    'Quote'
]
