"""Tests for the stdout fortune rendering."""

import io
import json
from dataclasses import replace

import pytest

from fortune_app.config.defaults import OutputParams
from fortune_app.delivery.stdout_delivery import (
    PLACEHOLDER_LINES,
    DeliveryStatus,
    StdoutFortuneDelivery,
    format_fortune_card,
    format_fortune_json,
)


@pytest.fixture
def result(engine, sample_inputs):
    return engine.compute(**sample_inputs)


class TestFormatFortuneCard:
    """Test format_fortune_card function."""

    def test_card_lines(self, result):
        lines = format_fortune_card(" 山田 花子 ", result).split("\n")
        assert lines[:6] == [
            "山田 花子 さんの今日の運勢",
            "吉",
            "Keyword：調和 × 安心・豊かさ × 探求・内省",
            "星座：牡牛座（テーマ：安心・豊かさ）",
            "ライフパスナンバー：7（探求・内省）",
            "名前の画数エネルギー：1（切り開く力）",
        ]
        assert lines[6] == result.message

    def test_placeholder_without_result(self):
        assert format_fortune_card("山田 花子", None) == "\n".join(PLACEHOLDER_LINES)

    def test_absent_number_placeholder(self, result):
        card = format_fortune_card("山田 花子", replace(result, life_path_number=None), absent_placeholder="-")
        assert "ライフパスナンバー：-（探求・内省）" in card


class TestFormatFortuneJson:
    """Test format_fortune_json function."""

    def test_result_document(self, result):
        data = json.loads(format_fortune_json("山田 花子", result))
        assert data["name"] == "山田 花子"
        assert data["result"] == result.to_dict()

    def test_null_result(self):
        assert json.loads(format_fortune_json("", None)) == {"name": "", "result": None}

    def test_non_ascii_kept(self, result):
        assert "牡牛座" in format_fortune_json("山田 花子", result)


class TestStdoutFortuneDelivery:
    """Test StdoutFortuneDelivery."""

    def test_pretty_delivery(self, result):
        stream = io.StringIO()
        outcome = StdoutFortuneDelivery(stream=stream).deliver("山田 花子", result)

        assert outcome.status is DeliveryStatus.SUCCESS
        assert stream.getvalue().startswith("山田 花子 さんの今日の運勢\n")
        assert stream.getvalue().endswith(result.message + "\n")

    def test_json_delivery(self, result):
        stream = io.StringIO()
        StdoutFortuneDelivery(config=OutputParams(format="json"), stream=stream).deliver("山田 花子", result)
        assert json.loads(stream.getvalue())["result"]["level"] == "吉"

    def test_write_failure(self, result):
        class BrokenStream(io.StringIO):
            def write(self, s):
                raise OSError("broken pipe")

        outcome = StdoutFortuneDelivery(stream=BrokenStream()).deliver("山田 花子", result)

        assert outcome.status is DeliveryStatus.FAILED
        assert isinstance(outcome.error, OSError)
