"""Tests for bordered strings and headings in layout/border.py."""

import pytest

from enums import HeadingStyle, LengthMode
from errors import InsufficientWidthError, UnknownStyleError, ValidationError
from layout.border import (
    HEADING_STYLES,
    build_bordered_string,
    build_heading,
    render_bordered_string,
    render_heading,
)
from terminal import FixedTerminal


class TestBorderedString:
    """Tests for render_bordered_string function."""

    def test_even_split(self) -> None:
        """Test both borders are equal when text and width split evenly."""
        assert render_bordered_string("X", "-", 1, 7) == ["-- X --"]

    def test_odd_split_extra_right(self) -> None:
        """Test the right border gets the extra character."""
        assert render_bordered_string("X", "-", 1, 8) == ["-- X ---"]

    def test_default_padding(self) -> None:
        """Test one space of padding by default."""
        assert render_bordered_string("abc", "*", None, 11) == ["*** abc ***"]

    def test_empty_text_border_only(self) -> None:
        """Test empty text yields a full border line."""
        assert render_bordered_string("", "=", None, 10) == ["=" * 10]
        assert render_bordered_string("", "=", None, 9) == ["=" * 9]

    def test_empty_text_ignores_padding(self) -> None:
        """Test padding is forced to 0 for empty text."""
        assert render_bordered_string("", "=", 3, 10) == ["=" * 10]

    def test_multiline(self) -> None:
        """Test each embedded line gets its own border."""
        assert render_bordered_string("ab\ncd", "-", 1, 10) == [
            "--- ab ---",
            "--- cd ---",
        ]

    def test_long_text_wraps(self) -> None:
        """Test text longer than the line is wrapped before bordering."""
        assert render_bordered_string("hello world", "-", 1, 10) == [
            "- hello --",
            "- world --",
        ]

    def test_terminal_width(self) -> None:
        """Test the terminal width is used when no width is given."""
        lines = render_bordered_string("hi", terminal=FixedTerminal(30))

        assert lines == ["------------- hi -------------"]

    @pytest.mark.parametrize("width", range(7, 31))
    @pytest.mark.parametrize("padding", [0, 1, 2])
    def test_every_line_fills_width(self, width: int, padding: int) -> None:
        """Test each line is exactly the requested width."""
        for text in ["", "X", "ab", "hello world", "a much longer line of text to wrap"]:
            lines = render_bordered_string(text, "#", padding, width)

            assert lines
            assert all(len(line) == width for line in lines)


class TestBorderedStringValidation:
    """Tests for bordered string argument validation."""

    @pytest.mark.parametrize("border", ["", "--"])
    def test_bad_border(self, border: str) -> None:
        """Test the border must be one character."""
        with pytest.raises(ValidationError):
            render_bordered_string("x", border, 1, 20)

    def test_negative_padding(self) -> None:
        """Test padding must be >= 0."""
        with pytest.raises(ValidationError):
            render_bordered_string("x", "-", -1, 20)

    def test_width_too_small_for_text(self) -> None:
        """Test two borders, padding and one character must fit."""
        with pytest.raises(InsufficientWidthError) as exc_info:
            render_bordered_string("X", "-", 1, 4)

        assert exc_info.value.minimum == 5

    def test_width_too_small_for_border(self) -> None:
        """Test a border-only line needs two characters."""
        with pytest.raises(InsufficientWidthError) as exc_info:
            render_bordered_string("", "-", None, 1)

        assert exc_info.value.minimum == 2

    def test_width_too_small_for_multibyte_char(self) -> None:
        """Test a character wider than the room left is reported, not split."""
        with pytest.raises(InsufficientWidthError) as exc_info:
            render_bordered_string("é", "-", 0, 3)

        assert exc_info.value.minimum == 4

    def test_multibyte_char_at_minimum(self) -> None:
        assert render_bordered_string("é", "-", 0, 4) == ["-é-"]

    def test_multibyte_chars_wrap_one_per_line(self) -> None:
        assert render_bordered_string("ééé", "-", 0, 4) == ["-é-", "-é-", "-é-"]

    def test_multibyte_char_in_characters(self) -> None:
        """Test CHARACTERS mode counts é as one column."""
        lines = render_bordered_string("é", "-", 0, 3, length_mode=LengthMode.CHARACTERS)

        assert lines == ["-é-"]

    def test_block(self) -> None:
        """Test build_bordered_string returns a border block."""
        block = build_bordered_string("X", "-", 1, 7)

        assert block.kind == "border"
        assert block.width == 7
        assert block.lines == ["-- X --"]
        assert block.columns is None


class TestHeadingStyles:
    """Tests for the heading style table."""

    def test_every_style_has_spec(self) -> None:
        """Test each HeadingStyle member is in the table."""
        assert set(HEADING_STYLES) == set(HeadingStyle)

    @pytest.mark.parametrize(
        "style",
        [style for style in HeadingStyle if len(style.value) == len("heading100")],
    )
    def test_numbered_padding(self, style: HeadingStyle) -> None:
        """Test the last two digits give blank lines before and after."""
        spec = HEADING_STYLES[style]

        assert spec.padding_top == int(style.value[-2])
        assert spec.padding_bottom == int(style.value[-1])

    @pytest.mark.parametrize(
        "level, border, padding, framed",
        [("1", "=", 5, True), ("2", "-", 5, True), ("3", "_", 1, False)],
    )
    def test_levels(self, level: str, border: str, padding: int, framed: bool) -> None:
        """Test each level shares its border, padding and frame."""
        for style, spec in HEADING_STYLES.items():
            if style.value.startswith(f"heading{level}"):
                assert (spec.border_char, spec.padding, spec.framed) == (
                    border,
                    padding,
                    framed,
                )


class TestRenderHeading:
    """Tests for render_heading function."""

    def test_heading1(self) -> None:
        """Test a framed level 1 heading with two blank lines before."""
        assert render_heading("heading1", "Title", 30) == [
            "",
            "",
            "=" * 30,
            "=======     Title     ========",
            "=" * 30,
            "",
        ]

    def test_heading3_unframed(self) -> None:
        """Test level 3 headings have no frame lines."""
        assert render_heading("--heading3", "Sub", 20) == ["", "_______ Sub ________"]

    def test_heading211(self) -> None:
        """Test short style tokens and symmetric blank lines."""
        lines = render_heading("-211", "Part", 24)

        assert lines[0] == ""
        assert lines[1] == "-" * 24
        assert "Part" in lines[2]
        assert lines[3] == "-" * 24
        assert lines[4] == ""
        assert len(lines) == 5

    def test_warning(self) -> None:
        """Test the warning prefix and border."""
        lines = render_heading("--warn", "Low disk", 30)

        assert lines[2] == "^^^^^ [WARNING] Low disk ^^^^^"

    def test_error_wraps(self) -> None:
        """Test a long error heading wraps inside the frame."""
        assert render_heading("--error", "Disk full", 20) == [
            "",
            "!" * 20,
            "!!! [ERROR] Disk !!!",
            "!!!!!!! full !!!!!!!",
            "!" * 20,
            "",
        ]

    @pytest.mark.parametrize("style", ["--heading4", "bogus", "heading12"])
    def test_unknown_style(self, style: str) -> None:
        """Test unknown styles raise UnknownStyleError."""
        with pytest.raises(UnknownStyleError) as exc_info:
            render_heading(style, "x", 40)

        assert exc_info.value.style == style

    def test_unknown_style_is_validation_error(self) -> None:
        """Test callers catching ValidationError also see unknown styles."""
        with pytest.raises(ValidationError):
            render_heading("nope", "x", 40)

    def test_block(self) -> None:
        """Test build_heading returns a heading block."""
        block = build_heading(HeadingStyle.HEADING300, "x", 20)

        assert block.kind == "heading"
        assert block.lines == ["________ x _________"]
