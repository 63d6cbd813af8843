"""
Тесты для Shell — CLI граница конвертера

Проверяет:
1. Чтение не более трёх строк, удаление переводов строки
2. Разбор запроса и MalformedInput на нарушениях грамматики
3. Сворачивание любой ошибки в токен "error"
4. Коды выхода
"""

import io
import logging

import pytest

from src.converter import Converter, ConverterConfig
from src.core.domain import MalformedInput
from src.shell import (
    ERROR_TOKEN,
    EXIT_ERROR,
    EXIT_OK,
    ConversionRequest,
    parse_request,
    read_lines,
    run,
)


def _run(text: str, converter: Converter | None = None) -> tuple[int, str]:
    stdout = io.StringIO()
    code = run(io.StringIO(text), stdout, converter)
    return code, stdout.getvalue()


# =============================================================================
# ТЕСТЫ: read_lines
# =============================================================================


class TestReadLines:
    """Чтение строк входа."""

    def test_three_lines(self):
        assert read_lines(io.StringIO("10\n255\n16\n")) == ["10", "255", "16"]

    def test_extra_lines_ignored(self):
        assert read_lines(io.StringIO("1\n2\n3\n4\n5\n")) == ["1", "2", "3"]

    def test_fewer_lines(self):
        assert read_lines(io.StringIO("10\n255\n")) == ["10", "255"]
        assert read_lines(io.StringIO("")) == []

    def test_crlf_and_missing_final_newline(self):
        assert read_lines(io.StringIO("16\r\nff\r\n10")) == ["16", "ff", "10"]

    def test_empty_line_kept(self):
        assert read_lines(io.StringIO("10\n\n2\n")) == ["10", "", "2"]


# =============================================================================
# ТЕСТЫ: parse_request
# =============================================================================


class TestParseRequest:
    """Разбор трёх строк в ConversionRequest."""

    def test_valid_request(self):
        request = parse_request(["16", "ff", "10"])
        assert request == ConversionRequest(source_radix=16, numeral="ff", target_radix=10)

    def test_too_few_lines(self):
        with pytest.raises(MalformedInput, match="Expected 3 input lines, got 2"):
            parse_request(["16", "ff"])

    def test_malformed_radix(self):
        with pytest.raises(MalformedInput, match="source_radix"):
            parse_request(["37", "ff", "10"])

        with pytest.raises(MalformedInput, match="target_radix"):
            parse_request(["16", "ff", "0"])

    def test_malformed_numeral(self):
        with pytest.raises(MalformedInput, match="numeral"):
            parse_request(["10", "0", "2"])

    def test_message_names_field_and_cause(self):
        """Сообщение: поле запроса и причина из контракта."""
        with pytest.raises(MalformedInput, match=r"^Malformed numeral: 'FF' does not match"):
            parse_request(["16", "FF", "10"])

    def test_request_immutable(self):
        request = parse_request(["2", "101", "10"])
        with pytest.raises(Exception):
            request.numeral = "1"


# =============================================================================
# ТЕСТЫ: run
# =============================================================================


class TestRun:
    """Полный запуск: вход → вывод и код выхода."""

    def test_integer_conversion(self):
        assert _run("16\nff\n10\n") == (EXIT_OK, "255\n")
        assert _run("10\n255\n16\n") == (EXIT_OK, "ff\n")

    def test_fractional_conversion(self):
        assert _run("10\n10.5\n2\n") == (EXIT_OK, "1010.10000\n")
        assert _run("2\n0.1\n10\n") == (EXIT_OK, "0.50000\n")

    def test_trailing_radix_point(self):
        assert _run("10\n10.\n2\n") == (EXIT_OK, "1010.00000\n")

    def test_unary(self):
        assert _run("10\n5\n1\n") == (EXIT_OK, "11111\n")
        assert _run("1\nzzz\n10\n") == (EXIT_OK, "3\n")

    def test_unary_zero_prints_empty_line(self):
        assert _run("10\n0.5\n1\n") == (EXIT_OK, "\n")

    def test_extra_input_ignored(self):
        assert _run("16\nff\n10\nnoise\n") == (EXIT_OK, "255\n")

    def test_fewer_than_three_lines(self):
        assert _run("16\nff\n") == (EXIT_ERROR, f"{ERROR_TOKEN}\n")
        assert _run("") == (EXIT_ERROR, "error\n")

    def test_grammar_violations(self):
        for text in (
            "37\n1\n10\n",
            "010\n1\n10\n",
            "10\n0\n2\n",
            "10\n00.1\n2\n",
            "16\nFF\n10\n",
            "10\n1.2.3\n2\n",
            "10\n5\n0\n",
        ):
            assert _run(text) == (EXIT_ERROR, "error\n"), text

    def test_core_error_collapsed(self):
        """Цифра >= radix проходит грамматику, но отвергается ядром."""
        assert _run("10\nf\n2\n") == (EXIT_ERROR, "error\n")

    def test_overflow_collapsed(self):
        assert _run("36\nzzzzzzzzzzzzz\n10\n") == (EXIT_ERROR, "error\n")

    def test_cause_logged(self, caplog):
        """Конкретная причина ошибки пишется в лог."""
        caplog.set_level(logging.DEBUG, logger="src.shell.main")
        _run("10\nf\n2\n")
        assert "DigitOutOfRange" in caplog.text

    def test_custom_converter(self):
        """Конфигурация конвертера передаётся снаружи."""
        converter = Converter(ConverterConfig(min_radix=2))
        assert _run("10\n5\n1\n", converter) == (EXIT_ERROR, "error\n")
        assert _run("10\n5\n2\n", converter) == (EXIT_OK, "101\n")
