from .catalog import MovieModel
from .identity import UserFavoriteModel, UserModel

__all__ = ["MovieModel", "UserFavoriteModel", "UserModel"]
