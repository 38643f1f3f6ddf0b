"""JSON 기반 구조적 깊은 복사"""

import json
from typing import Any

from tradermod.core.errors import SerializationError


class JsonSerializer:
    """deserialize(serialize(x))는 x와 값이 같고 참조는 독립적인 복사본.

    JSON으로 표현 불가능한 값(set, 임의 객체, NaN 등)은 SerializationError.
    """

    def serialize(self, obj: Any) -> str:
        try:
            return json.dumps(obj, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize value: {e}") from e

    def deserialize(self, text: str) -> Any:
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot deserialize value: {e}") from e

    def clone(self, obj: Any) -> Any:
        return self.deserialize(self.serialize(obj))
