class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（リビジョンが期待値と異なる場合）"""

    pass


class AuthenticationFailedException(DomainException):
    """認証失敗（ユーザー不在とパスワード不一致を区別しない）"""

    pass


class AccountCreationFailedException(DomainException):
    """アカウント作成失敗（重複・通信エラーを区別しない）"""

    pass


class InvalidPayloadException(BusinessRuleViolationException):
    """入力ペイロードが不正な場合"""

    pass


class InvalidFlightPayloadException(InvalidPayloadException):
    """フライトペイロードが不正な場合"""

    pass


class UserNotFoundException(ResourceNotFoundException):
    """予約対象のユーザーが存在しない場合"""

    pass


class DataConsistencyException(DomainException):
    """参照先のフライトドキュメントが存在しない場合（非アトミック書き込みの結果）"""

    pass
