import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any

import boto3

from travel_core.account.domain.capability import TokenIssuer

DEFAULT_TTL_SECONDS = 60 * 60 * 24


def _encode_segment(obj: dict[str, Any]) -> str:
    raw = json.dumps(obj, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decode_segment(segment: str) -> bytes:
    # base64url はパディングを省略しているので補ってから復号する
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


class HmacTokenIssuer(TokenIssuer):
    """HS256 署名付き JWT を発行する TokenIssuer

    署名鍵の解決順:
    1. コンストラクタ引数 secret
    2. 環境変数 TOKEN_SECRET
    3. 環境変数 TOKEN_SECRET_ARN が指す Secrets Manager のシークレット（プロセス内でキャッシュ）

    有効期限は ttl_seconds、未指定なら環境変数 TOKEN_TTL_SECONDS（既定 24 時間）。
    """

    _HEADER_SEGMENT = _encode_segment({"alg": "HS256", "typ": "JWT"})

    def __init__(
        self,
        secret: str | None = None,
        ttl_seconds: int | None = None,
        secret_arn: str | None = None,
    ) -> None:
        self._secret = secret or os.getenv("TOKEN_SECRET")
        self._secret_arn = secret_arn or os.getenv("TOKEN_SECRET_ARN")
        if ttl_seconds is None:
            ttl_seconds = int(os.getenv("TOKEN_TTL_SECONDS", str(DEFAULT_TTL_SECONDS)))
        self._ttl_seconds = ttl_seconds

    def issue(self, subject: str) -> str:
        unsigned = ".".join(
            [
                self._HEADER_SEGMENT,
                _encode_segment(
                    {"sub": subject, "exp": int(time.time()) + self._ttl_seconds}
                ),
            ]
        )
        signature = base64.urlsafe_b64encode(self._sign(unsigned)).decode("ascii")
        return f"{unsigned}.{signature.rstrip('=')}"

    def decode(self, token: str) -> dict[str, Any] | None:
        """署名と有効期限を検証し、クレームを返す（不正なら None）"""
        unsigned, _, signature = token.rpartition(".")
        header, _, claims_segment = unsigned.partition(".")
        if header != self._HEADER_SEGMENT or not claims_segment:
            return None
        try:
            if not hmac.compare_digest(
                self._sign(unsigned), _decode_segment(signature)
            ):
                return None
            claims = json.loads(_decode_segment(claims_segment))
        except ValueError:
            return None
        if int(claims.get("exp", 0)) < int(time.time()):
            return None
        return claims

    def _sign(self, unsigned: str) -> bytes:
        key = self._get_secret().encode("utf-8")
        return hmac.new(key, unsigned.encode("ascii"), hashlib.sha256).digest()

    def _get_secret(self) -> str:
        if self._secret is None:
            if not self._secret_arn:
                raise ValueError("Token secret is not configured")
            client = boto3.client("secretsmanager")
            response = client.get_secret_value(SecretId=self._secret_arn)
            self._secret = response["SecretString"]
        return self._secret
