"""Standard output rendering of fortune readings."""

import json
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

import structlog

from ..config.defaults import MessageParams, OutputParams
from ..models.fortune import FortuneResult

PLACEHOLDER_LINES = (
    "まだ結果はひみつです。",
    "お名前と生年月日を入力して、「今の運勢をみる」を押してください。",
)


class DeliveryStatus(Enum):
    """Rendering status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeliveryResult:
    """Result of a rendering attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    error: Optional[Exception] = None


def format_fortune_card(
    name: str,
    result: Optional[FortuneResult],
    absent_placeholder: str = MessageParams.absent_placeholder
) -> str:
    """Format a reading as a plain-text card, or the placeholder when there is no result."""
    if result is None:
        return "\n".join(PLACEHOLDER_LINES)

    def _number(value: Optional[int]) -> str:
        return absent_placeholder if value is None else str(value)

    lines = [
        f"{name.strip()} さんの{result.period_label}の運勢",
        result.level.value,
        f"Keyword：{result.keyword}",
        f"星座：{result.zodiac.value}（テーマ：{result.zodiac_keyword}）",
        f"ライフパスナンバー：{_number(result.life_path_number)}（{result.life_path_keyword}）",
        f"名前の画数エネルギー：{_number(result.name_energy_number)}（{result.name_energy_keyword}）",
        result.message,
    ]
    return "\n".join(lines)


def format_fortune_json(name: str, result: Optional[FortuneResult]) -> str:
    """Format a reading as a JSON document; "result" is null when there is none."""
    return json.dumps(
        {"name": name.strip(), "result": result.to_dict() if result else None},
        ensure_ascii=False
    )


class StdoutFortuneDelivery:
    """Writes fortune readings to a text stream."""

    def __init__(
        self,
        config: Optional[OutputParams] = None,
        stream: Optional[TextIO] = None,
        absent_placeholder: str = MessageParams.absent_placeholder
    ):
        self.config = config or OutputParams()
        self.stream = stream
        self.absent_placeholder = absent_placeholder
        self.logger = structlog.get_logger(__name__)

    def deliver(self, name: str, result: Optional[FortuneResult]) -> DeliveryResult:
        """Render one reading."""
        stream = self.stream or sys.stdout
        try:
            print(self._format(name, result), file=stream, flush=True)
        except OSError as e:
            self.logger.error("Failed to write fortune", error=str(e))
            return DeliveryResult(
                status=DeliveryStatus.FAILED,
                message=f"Stdout error: {e}",
                error=e
            )

        self.logger.debug(
            "Fortune written",
            format=self.config.format,
            has_result=result is not None
        )
        return DeliveryResult(status=DeliveryStatus.SUCCESS, message="Printed to stdout")

    def _format(self, name: str, result: Optional[FortuneResult]) -> str:
        if self.config.format == "json":
            return format_fortune_json(name, result)
        return format_fortune_card(name, result, self.absent_placeholder)
