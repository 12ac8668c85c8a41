from library_app.errors import NotFoundError
from library_app.models.user import User
from library_app.repositories.user_repo import UserRepo

class UserService:
    @staticmethod
    def list_users(session):
        return UserRepo.list_all(session)

    @staticmethod
    def get_user(session, user_id: int):
        user = UserRepo.get_by_id(session, user_id)
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return user

    @staticmethod
    def create_user(session, data: dict):
        user = User(name=data["name"], email=data["email"])
        return UserRepo.create(session, user)

    @staticmethod
    def update_user(session, user_id: int, data: dict):
        user = UserService.get_user(session, user_id)
        # id stays as assigned
        for k in ["name", "email"]:
            if k in data:
                setattr(user, k, data[k])

        UserRepo.update(session)
        return user

    @staticmethod
    def delete_user(session, user_id: int):
        user = UserService.get_user(session, user_id)
        UserRepo.delete(session, user)
        return user
