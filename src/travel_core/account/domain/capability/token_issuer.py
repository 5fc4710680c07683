from abc import ABC, abstractmethod


class TokenIssuer(ABC):
    """認証トークン発行のインターフェース"""

    @abstractmethod
    def issue(self, subject: str) -> str:
        """subject（ユーザー名）に紐づくトークンを発行する"""
        raise NotImplementedError
