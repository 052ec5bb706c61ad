"""Tests for color tag expansion."""

from colorama import Back, Fore, Style

from pogoda.reporting.colors import RESET, ansi_colour_string, color_code

GREEN = Fore.GREEN


class TestAnsiColourString:
    def test_plain_text_without_color(self):
        assert ansi_colour_string("string", color=False) == "string"

    def test_plain_text_with_color(self):
        assert ansi_colour_string("string", color=True) == "string"

    def test_tags_stripped_without_color(self):
        assert ansi_colour_string("string <green>green</>", color=False) == "string green"
        assert ansi_colour_string("<green>x</>", color=False) == "x"

    def test_short_closing_tag(self):
        assert (
            ansi_colour_string("string <green>green</>", color=True)
            == "string " + GREEN + "green" + RESET
        )

    def test_named_closing_tag(self):
        assert (
            ansi_colour_string("string <green>green</green>", color=True)
            == "string " + GREEN + "green" + RESET
        )

    def test_unclosed_tag(self):
        result = ansi_colour_string("string <green>green", color=True)
        assert result == "string " + GREEN + "green"
        assert not result.endswith(RESET)

    def test_unknown_tag_left_alone(self):
        assert ansi_colour_string("<orange>x", color=True) == "<orange>x"
        assert ansi_colour_string("a < b > c", color=False) == "a < b > c"


class TestColorCode:
    def test_high_intensity(self):
        assert color_code("red+h") == Fore.LIGHTRED_EX

    def test_bold(self):
        assert color_code("blue+b") == Style.BRIGHT + Fore.BLUE

    def test_underline_and_italic(self):
        assert color_code("cyan+ui") == "\033[4m\033[3m" + Fore.CYAN

    def test_background(self):
        assert color_code("white:blue") == Fore.WHITE + Back.BLUE
        assert color_code("black:yellow+h") == Fore.BLACK + Back.LIGHTYELLOW_EX

    def test_grey(self):
        assert color_code("grey") == Fore.LIGHTBLACK_EX

    def test_256_colors(self):
        assert color_code("202") == "\033[38;5;202m"
        assert color_code("15:236") == "\033[38;5;15m\033[48;5;236m"
