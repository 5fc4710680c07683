from .user_id import UserId as UserId
