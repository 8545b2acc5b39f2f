from app.models.user_model import User
from app.models.category_model import Category

__all__ = ["User", "Category"]