from enum import Enum


class DurabilityLevel(Enum):
    """書き込みの永続化保証レベル

    NONE 以外を指定すると、要求したレプリカ数・永続化が満たされるまで
    書き込みは完了を返さない。
    """

    NONE = "NONE"
    MAJORITY = "MAJORITY"
    MAJORITY_AND_PERSIST_TO_ACTIVE = "MAJORITY_AND_PERSIST_TO_ACTIVE"
    PERSIST_TO_MAJORITY = "PERSIST_TO_MAJORITY"

    @property
    def is_default(self) -> bool:
        return self is DurabilityLevel.NONE
