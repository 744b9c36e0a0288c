"""Tests unitaires pour ConfigValue."""

import dataclasses

import pytest

from ini_config_utils.dotconf import ConfigValue
from ini_config_utils.dotconf.value import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    parse_int_prefix,
)


class TestAsString:
    """Tests pour as_string()."""

    def test_returns_value(self):
        assert ConfigValue("localhost").as_string("d") == "localhost"

    def test_empty_returns_default(self):
        """Une valeur vide retourne la valeur par défaut."""
        assert ConfigValue("").as_string("d") == "d"
        assert ConfigValue().as_string() == ""


class TestAsInteger:
    """Tests pour as_int32() et as_int64()."""

    def test_parses_number(self):
        assert ConfigValue("42").as_int32() == 42
        assert ConfigValue("42").as_int64() == 42

    def test_empty_returns_default(self):
        assert ConfigValue("").as_int32(7) == 7
        assert ConfigValue("").as_int64(-3) == -3

    def test_non_numeric_returns_zero(self):
        """Un texte non numérique donne 0, pas la valeur par défaut."""
        assert ConfigValue("abc").as_int32(5) == 0
        assert ConfigValue("abc").as_int64(5) == 0

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("  12", 12),
            ("-12xyz", -12),
            ("+8", 8),
            ("3.9", 3),
            ("10 20", 10),
            ("- 4", 0),
        ],
    )
    def test_partial_parse(self, text, expected):
        """La lecture s'arrête au premier caractère non numérique."""
        assert ConfigValue(text).as_int32() == expected

    def test_int32_is_clamped(self):
        """Un dépassement est borné à l'intervalle 32 bits."""
        assert ConfigValue("99999999999").as_int32() == INT32_MAX
        assert ConfigValue("-99999999999").as_int32() == INT32_MIN

    def test_int64_range(self):
        assert ConfigValue("99999999999").as_int64() == 99999999999
        assert ConfigValue("9" * 30).as_int64() == INT64_MAX

    def test_parse_int_prefix(self):
        assert parse_int_prefix("\t\n 5s", 0, 10) == 5
        assert parse_int_prefix("50", 0, 10) == 10


class TestOtherConversions:
    """Tests pour as_float() et as_bool()."""

    def test_as_float(self):
        assert ConfigValue("3.5kg").as_float() == 3.5
        assert ConfigValue("1e3").as_float() == 1000.0
        assert ConfigValue(".5").as_float() == 0.5
        assert ConfigValue("abc").as_float(2.0) == 0.0
        assert ConfigValue("").as_float(2.0) == 2.0

    @pytest.mark.parametrize("text", ["1", "true", "Yes", "ON"])
    def test_as_bool_true(self, text):
        assert ConfigValue(text).as_bool() is True

    @pytest.mark.parametrize("text", ["0", "False", "no", "off"])
    def test_as_bool_false(self, text):
        assert ConfigValue(text).as_bool(True) is False

    def test_as_bool_default(self):
        """Une valeur vide ou non reconnue retourne la valeur par défaut."""
        assert ConfigValue("").as_bool(True) is True
        assert ConfigValue("maybe").as_bool() is False


class TestValueObject:
    """Tests du comportement d'objet valeur."""

    def test_equality(self):
        assert ConfigValue("a") == ConfigValue("a")
        assert ConfigValue("a") != ConfigValue("b")

    def test_truthiness(self):
        assert ConfigValue("x")
        assert not ConfigValue("")
        assert ConfigValue("").is_empty()

    def test_str(self):
        assert str(ConfigValue("value")) == "value"

    def test_immutability(self):
        """ConfigValue est immuable (frozen)."""
        value = ConfigValue("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.value = "b"
