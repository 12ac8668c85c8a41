from sqlalchemy import select

from library_app.models.user import User
from library_app.repositories.base import commit

class UserRepo:
    @staticmethod
    def list_all(session):
        return session.scalars(select(User).order_by(User.id)).all()

    @staticmethod
    def get_by_id(session, user_id: int):
        return session.get(User, user_id)

    @staticmethod
    def create(session, user: User):
        session.add(user)
        commit(session, "user")
        return user

    @staticmethod
    def update(session):
        commit(session, "user")

    @staticmethod
    def delete(session, user: User):
        session.delete(user)
        commit(session, "user")
