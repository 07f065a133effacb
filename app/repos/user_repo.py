from app.data.models.user import UserModel


class UserRepo:
    def __init__(self, users: list[UserModel] | None = None):
        self.users = users if users is not None else []

    def get_user(self, user_id: int) -> UserModel | None:
        return next((u for u in self.users if u.id == user_id), None)

    def get_by_email(self, email: str) -> UserModel | None:
        return next((u for u in self.users if u.email == email), None)

    def list_users(self) -> list[UserModel]:
        return list(self.users)

    def next_id(self) -> int:
        return max((u.id for u in self.users), default=0) + 1

    def create_user(self, user: UserModel) -> UserModel:
        self.users.append(user)
        return user
