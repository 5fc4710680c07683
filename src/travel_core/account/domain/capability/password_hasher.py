from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """パスワードの一方向ハッシュ（ソルト付き）のインターフェース"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """平文からハッシュ文字列を生成する"""
        raise NotImplementedError

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """平文がハッシュ文字列と一致するか検証する"""
        raise NotImplementedError
