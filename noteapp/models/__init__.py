from noteapp.models.note import Note
from noteapp.models.user import User

__all__ = ["Note", "User"]
