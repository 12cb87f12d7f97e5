# CRUD operations package

from .admin import admin_crud
from .blog import blog_crud
from .cv import cv_crud
from .hobby import hobby_crud
from .category import category_crud
from .quote import quote_crud

__all__ = [
    'admin_crud',
    'blog_crud',
    'cv_crud',
    'hobby_crud',
    'category_crud',
    'quote_crud'
]
