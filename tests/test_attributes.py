"""Tests for flag and option formatting."""

from hypothesis import given
from hypothesis import strategies as st

from texdsl.attributes import format_attributes, format_flags, format_options

words = st.text(alphabet=st.characters(exclude_characters="\n"), max_size=8)


class TestFormatFlags:
    def test_empty(self) -> None:
        assert format_flags([]) == ""

    def test_single(self) -> None:
        assert format_flags(["russian"]) == "[russian]"

    def test_order_preserved(self) -> None:
        assert format_flags(["a", "b", "c"]) == "[a, b, c]"

    def test_accepts_generator(self) -> None:
        assert format_flags(f for f in ("x", "y")) == "[x, y]"

    def test_empty_string_flag_still_bracketed(self) -> None:
        """A list holding one empty flag is not empty input."""
        assert format_flags([""]) == "[]"

    def test_values_not_escaped(self) -> None:
        assert format_flags(["a]b", "{c}"]) == "[a]b, {c}]"


class TestFormatOptions:
    def test_empty_mapping(self) -> None:
        assert format_options({}) == ""

    def test_empty_pairs(self) -> None:
        assert format_options([]) == ""

    def test_pairs(self) -> None:
        assert format_options([("x", "1"), ("y", "2")]) == "[x=1, y=2]"

    def test_mapping_insertion_order(self) -> None:
        options = {"z": "1", "a": "2", "m": "3"}
        assert format_options(options) == "[z=1, a=2, m=3]"

    def test_duplicate_key_last_value_wins(self) -> None:
        assert format_options([("x", "1"), ("y", "2"), ("x", "3")]) == "[x=3, y=2]"

    def test_deterministic_across_runs(self) -> None:
        pairs = [("x", "1"), ("y", "2")]
        results = {format_options(pairs) for _ in range(20)}
        assert results == {"[x=1, y=2]"}


class TestFormatAttributes:
    def test_dispatches_flags(self) -> None:
        assert format_attributes(["a", "b"]) == "[a, b]"

    def test_dispatches_mapping(self) -> None:
        assert format_attributes({"k": "v"}) == "[k=v]"

    def test_dispatches_pairs(self) -> None:
        assert format_attributes([("k", "v")]) == "[k=v]"

    def test_empty(self) -> None:
        assert format_attributes([]) == ""
        assert format_attributes({}) == ""


class TestFormatterProperties:
    """Property-based checks for the bracket contract."""

    @given(flags=st.lists(words, max_size=6))
    def test_flags_empty_iff_no_input(self, flags: list[str]) -> None:
        out = format_flags(flags)
        if flags:
            assert out.startswith("[")
            assert out.endswith("]")
            assert out == "[" + ", ".join(flags) + "]"
        else:
            assert out == ""

    @given(options=st.dictionaries(words, words, max_size=6))
    def test_options_empty_iff_no_input(self, options: dict[str, str]) -> None:
        out = format_options(options)
        if options:
            assert out.startswith("[")
            assert out.endswith("]")
            expected = ", ".join(f"{k}={v}" for k, v in options.items())
            assert out == f"[{expected}]"
        else:
            assert out == ""

    @given(pairs=st.lists(st.tuples(words, words), max_size=6))
    def test_pairs_are_deterministic(self, pairs: list[tuple[str, str]]) -> None:
        assert format_options(pairs) == format_options(pairs)
