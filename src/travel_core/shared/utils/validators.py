from decimal import Decimal
from typing import Any


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def replace_floats(value: Any) -> Any:
    """ネストした dict / list 内の float を Decimal に置き換える

    DynamoDB の数値型は float を受け付けないため、書き込み前に変換する。
    それ以外の型はそのまま返す（未対応の型は boto3 のシリアライザが TypeError を送出する）。
    """
    if isinstance(value, float):
        return to_decimal(value)
    if isinstance(value, dict):
        return {k: replace_floats(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [replace_floats(v) for v in value]
    return value
