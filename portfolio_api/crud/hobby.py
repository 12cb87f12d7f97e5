from .base import CRUDBase
from portfolio_api.models.hobby import Hobby
from portfolio_api.schemas.hobby import HobbyCreate, HobbyUpdate

class CRUDHobby(CRUDBase[Hobby, HobbyCreate, HobbyUpdate]):
    default_order = (("order", False), ("created_at", True))

hobby_crud = CRUDHobby(Hobby)
