"""Integration tests for the JSON Formatter."""

import pytest
from json_linter import JSONFormatter, pretty_json
from json_linter.models import JsonObject, Token
from json_linter.types import InputError, LexError, NestingError, ParseError, TokenType


class TestJSONFormatterIntegration:
    """Integration tests for the complete tokenize/parse/generate pipeline."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = JSONFormatter()

    def test_format_flat_object(self, flat_object_json, flat_object_pretty):
        """Test the flat object sample at indent width 4."""
        result = self.formatter.format(flat_object_json, 4)

        assert result.success
        assert result.output == flat_object_pretty
        assert result.error is None

    def test_format_array(self):
        """Test the array sample yields six lines without a trailing comma."""
        result = self.formatter.format('[123,456,"apple",true]')

        assert result.success
        assert result.output.splitlines() == [
            "[",
            "    123,",
            "    456,",
            '    "apple",',
            "    true",
            "]",
        ]

    def test_format_nested(self, image_json, image_pretty):
        """Test the nested Image sample."""
        result = self.formatter.format(image_json)

        assert result.success
        assert result.output == image_pretty

    @pytest.mark.parametrize("text, expected", [
        ("null", "null"),
        ("true", "true"),
        ("false", "false"),
        ("0", "0"),
        ("123", "123"),
        ("-45", "-45"),
        ('"apple"', '"apple"'),
        ('  "x"  ', '"x"'),
        (r'"\" \\ \/ \b \f \n \r \t"', r'"\" \\ / \b \f \n \r \t"'),
    ])
    def test_primitive_canonical_form(self, text, expected):
        """Test primitive roots format to their canonical form."""
        assert pretty_json(text) == expected

    @pytest.mark.parametrize("text", ["{}", "[]", " { } ", "[\n]"])
    def test_empty_containers(self, text):
        """Test empty containers format without an interior newline."""
        assert pretty_json(text) in ("{}", "[]")

    @pytest.mark.parametrize("indent", [0, 2, 4, 8])
    def test_idempotent(self, image_json, indent):
        """Test formatting formatted output reproduces it exactly."""
        once = pretty_json(image_json, indent)
        assert pretty_json(once, indent) == once

    def test_idempotent_with_escapes(self):
        """Test strings with escapes survive a second pass."""
        once = pretty_json(r'{"q\"k": ["tab\there", "back\\slash"]}')
        assert pretty_json(once) == once

    def test_member_order_preserved(self):
        """Test members are written in source order."""
        output = pretty_json('{"k3": 1, "k1": 2, "k2": 3}')
        assert [line.split(":")[0].strip() for line in output.splitlines()[1:-1]] == [
            '"k3"', '"k1"', '"k2"',
        ]

    def test_default_indent_width(self):
        """Test the formatter's default indent width is used."""
        formatter = JSONFormatter(default_indent_width=2)
        assert formatter.format("[1]").output == "[\n  1\n]"
        assert formatter.format("[1]", 3).output == "[\n   1\n]"

    def test_raw_strings(self):
        """Test escape_strings=False writes decoded text verbatim."""
        formatter = JSONFormatter(escape_strings=False)
        assert formatter.format(r'"a\tb"').output == '"a\tb"'

    def test_stages(self):
        """Test the stages are usable on their own."""
        tokens = self.formatter.tokenize('{"a": 1}')
        assert tokens[-1] == Token.of(TokenType.END_OF_INPUT)
        assert len(tokens) == 6

        document = self.formatter.parse('{"a": 1}')
        assert isinstance(document, JsonObject)
        assert self.formatter.generate(document, 1) == '{\n "a": 1\n}'

    def test_text_after_root_value_ignored(self):
        """Test only the first complete value is formatted."""
        result = self.formatter.format("[1] 2")

        assert result.success
        assert result.output == "[\n    1\n]"


class TestJSONFormatterErrors:
    """Failure behaviour of the pipeline."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = JSONFormatter()

    def test_parse_error_result(self):
        """Test a grammar error becomes an unsuccessful result."""
        result = self.formatter.format('{"a":}')

        assert not result.success
        assert result.output == ""
        assert "'}'" in result.error

    def test_lex_error_result(self):
        """Test an unterminated string becomes an unsuccessful result."""
        result = self.formatter.format('"abc')

        assert not result.success
        assert "reached end of input before finding" in result.error

    def test_negative_indent_result(self):
        """Test a negative indent width is reported, not raised."""
        result = self.formatter.format("[]", -1)

        assert not result.success
        assert "non-negative" in result.error

    def test_non_string_input_result(self):
        """Test non-str input is reported, not raised."""
        result = self.formatter.format(None)

        assert not result.success
        assert "must be a str" in result.error

    def test_pretty_json_raises(self):
        """Test the raising entry point."""
        with pytest.raises(LexError):
            pretty_json("[1, @]")
        with pytest.raises(ParseError):
            pretty_json("[1,]")
        with pytest.raises(InputError):
            pretty_json("[]", -2)

    def test_generate_validates_indent(self):
        """Test generate rejects a bad indent width like format does."""
        document = self.formatter.parse("[1]")
        with pytest.raises(InputError, match="non-negative"):
            self.formatter.generate(document, -1)
        with pytest.raises(InputError, match="must be an int"):
            self.formatter.generate(document, "2")

    def test_invalid_default_indent(self):
        """Test the constructor validates its default indent width."""
        with pytest.raises(InputError):
            JSONFormatter(default_indent_width=-1)

    def test_deep_nesting(self):
        """Test nesting beyond the recursion limit is a NestingError."""
        depth = 100000
        with pytest.raises(NestingError, match="nested too deeply"):
            pretty_json("[" * depth + "]" * depth)

    def test_first_error_wins(self):
        """Test the lexer error is reported before any grammar error."""
        result = self.formatter.format('[1,, "abc')

        assert not result.success
        assert "reached end of input before finding" in result.error
