import os
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from travel_core.shared.domain import (
    DocumentStore,
    DuplicateResourceException,
    DurabilityLevel,
    OptimisticLockException,
    StoredDocument,
)
from travel_core.shared.utils import get_logger, replace_floats

logger = get_logger("document-store")

DOCUMENT_SK = "DOCUMENT"


class DynamoDBDocumentStore(DocumentStore):
    """DynamoDB を使用した DocumentStore の具象実装

    シングルテーブル設計で namespace とキーを PK に埋め込む。
    ドキュメント本体は body 属性に DynamoDB のマップ型としてそのまま保持する。
    数値は Decimal で読み戻される（float は書き込み時に Decimal へ変換する）。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    @property
    def name(self) -> str:
        return f"table {self.table_name}"

    def get(self, namespace: str, key: str) -> StoredDocument | None:
        """キーでドキュメントを取得する（強整合性読み込み）"""
        response = self.table.get_item(
            Key=self._key(namespace, key),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return StoredDocument(
            content=item["body"],
            revision=int(item["revision"]),
        )

    def insert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        """新規ドキュメントを書き込む（同一キーが存在すれば失敗）"""
        self._log_durability(namespace, key, durability)
        item = {
            **self._key(namespace, key),
            "entity_type": namespace.upper(),
            "body": self._serialize(document),
            "revision": 1,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Document already exists: {key}")
            raise

    def upsert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        """ドキュメント全体を置き換え、リビジョンを進める"""
        self._log_durability(namespace, key, durability)
        self.table.update_item(**self._update_kwargs(namespace, key, document))

    def replace(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        expected_revision: int,
    ) -> None:
        """リビジョンが一致する場合のみ置き換える（楽観ロック）"""
        kwargs = self._update_kwargs(namespace, key, document)
        kwargs["ConditionExpression"] = Attr("revision").eq(expected_revision)
        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Document revision conflict: "
                    f"expected {expected_revision}, "
                    f"key={key}"
                )
            raise

    def _update_kwargs(
        self, namespace: str, key: str, document: dict[str, Any]
    ) -> dict:
        return {
            "Key": self._key(namespace, key),
            "UpdateExpression": "SET #body = :body, entity_type = :entity_type "
            "ADD revision :one",
            "ExpressionAttributeNames": {"#body": "body"},
            "ExpressionAttributeValues": {
                ":body": self._serialize(document),
                ":entity_type": namespace.upper(),
                ":one": 1,
            },
        }

    @staticmethod
    def _key(namespace: str, key: str) -> dict:
        return {"PK": f"{namespace.upper()}#{key}", "SK": DOCUMENT_SK}

    @staticmethod
    def _serialize(document: dict[str, Any]) -> dict[str, Any]:
        return replace_floats(document)

    @staticmethod
    def _log_durability(namespace: str, key: str, durability: DurabilityLevel) -> None:
        # DynamoDB は複数 AZ への永続化完了後に応答するため、全レベルを満たす
        if not durability.is_default:
            logger.debug(
                "Durable write requested",
                extra={
                    "namespace": namespace,
                    "key": key,
                    "durability": durability.value,
                },
            )
