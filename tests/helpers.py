"""Seed data and direct-database helpers shared by the API tests."""

from typing import List
from uuid import uuid4

from sqlalchemy import select

from noteapp.models import Note, User

INITIAL_USER = {"username": "root", "name": "Superuser", "password": "sekret"}

INITIAL_NOTES = [
    {"content": "HTML is easy", "important": False},
    {"content": "Browser can execute only Javascript", "important": True},
]


async def notes_in_db(app) -> List[Note]:
    async with app.state.database.session() as session:
        result = await session.execute(select(Note).order_by(Note.date))
        return list(result.scalars().all())


async def users_in_db(app) -> List[User]:
    async with app.state.database.session() as session:
        result = await session.execute(select(User))
        return list(result.scalars().all())


def non_existing_id() -> str:
    """A well-formed identifier that no record uses."""
    return str(uuid4())
