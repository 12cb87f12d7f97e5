from .base import CRUDBase
from portfolio_api.models.category import Category
from portfolio_api.schemas.category import CategoryCreate, CategoryUpdate

class CRUDCategory(CRUDBase[Category, CategoryCreate, CategoryUpdate]):
    default_order = (("order", False), ("name", False))

category_crud = CRUDCategory(Category)
