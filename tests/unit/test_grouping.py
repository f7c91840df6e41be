"""Unit tests for grouping items into letter sections.

Each test has a single assertion and focuses on behavior.
"""

import concurrent.futures
import random

from pydantic import ValidationError
import pytest

from letterindex.core import InvalidItemError, build, first_character, group_key, sort_key
from letterindex.data import FRUITS


class TestGroupKey:
    """Test group_key behavior."""

    def test_uppercases_first_letter(self) -> None:
        """When item starts with a lowercase letter, key is the uppercase letter."""
        assert group_key("apple") == "A"

    def test_keeps_uppercase_first_letter(self) -> None:
        """When item starts with an uppercase letter, key is that letter."""
        assert group_key("Banana") == "B"

    def test_precomposed_accent_keys_on_accented_letter(self) -> None:
        """When item starts with a precomposed accented letter, key keeps the accent."""
        assert group_key("\u00e9clair") == "\u00c9"

    def test_combining_accent_keys_like_precomposed(self) -> None:
        """When the accent is a combining mark, key matches the precomposed form."""
        assert group_key("e\u0301clair") == "\u00c9"

    def test_non_letter_first_character_is_kept(self) -> None:
        """When item starts with a digit, the digit is the key."""
        assert group_key("42nd street") == "4"

    def test_empty_item_raises(self) -> None:
        """When item is empty, raises InvalidItemError."""
        with pytest.raises(InvalidItemError):
            group_key("")

    def test_non_string_item_raises(self) -> None:
        """When item is not a string, raises InvalidItemError."""
        with pytest.raises(InvalidItemError):
            group_key(None)  # type: ignore[arg-type]

    def test_decomposed_hangul_keys_like_precomposed(self) -> None:
        """When a Hangul syllable is spelled as separate jamo, key is the composed syllable."""
        assert group_key("\u1100\u1161\u11b7") == "\uac10"

    def test_flag_emoji_stays_whole(self) -> None:
        """When item starts with a flag, both regional indicators form the key."""
        assert group_key("\U0001f1eb\U0001f1f7 France") == "\U0001f1eb\U0001f1f7"

    def test_zwj_sequence_stays_whole(self) -> None:
        """When item starts with a ZWJ emoji sequence, the whole sequence is the key."""
        assert group_key("\U0001f469\u200d\U0001f4bb dev") == "\U0001f469\u200d\U0001f4bb"

    def test_spacing_mark_stays_with_base(self) -> None:
        """When a Devanagari consonant carries a spacing vowel sign, both form the key."""
        assert group_key("\u0915\u093e\u092e") == "\u0915\u093e"


class TestFirstCharacter:
    """Test first_character behavior."""

    def test_includes_trailing_combining_marks(self) -> None:
        """When the base letter carries two combining marks, both are included."""
        assert first_character("a\u0323\u0301bc") == "\u1ea1\u0301"

    def test_single_character_item(self) -> None:
        """When item is one character, returns it."""
        assert first_character("x") == "x"


class TestSortKey:
    """Test sort_key behavior."""

    def test_ignores_case(self) -> None:
        """When comparing mixed-case strings, case does not decide order."""
        assert sort_key("kiwi") < sort_key("Kumquat")

    def test_breaks_ties_by_code_point(self) -> None:
        """When strings differ only by case, uppercase sorts first."""
        assert sort_key("Apple") < sort_key("apple")


class TestBuild:
    """Test build behavior."""

    def test_groups_and_orders_sections(self) -> None:
        """When items start with different letters, sections come out in key order."""
        index = build(["Apple", "Orange", "Apricot", "Banana"])
        assert list(index.to_dict().items()) == [
            ("A", ["Apple", "Apricot"]),
            ("B", ["Banana"]),
            ("O", ["Orange"]),
        ]

    def test_mixed_case_items_share_a_section(self) -> None:
        """When items differ in first-letter case, they share one section sorted case-insensitively."""
        index = build(["kiwi", "Kumquat"])
        assert index.to_dict() == {"K": ["kiwi", "Kumquat"]}

    def test_empty_input_gives_empty_index(self) -> None:
        """When no items are given, returns an index with no sections."""
        assert len(build([])) == 0

    def test_empty_item_raises(self) -> None:
        """When an item is empty, raises InvalidItemError."""
        with pytest.raises(InvalidItemError):
            build([""])

    def test_error_reports_position_of_empty_item(self) -> None:
        """When an empty item follows valid ones, the error names its position."""
        with pytest.raises(InvalidItemError) as excinfo:
            build(["Apple", "Banana", ""])
        assert excinfo.value.position == 2

    def test_invalid_item_error_is_value_error(self) -> None:
        """InvalidItemError can be caught as ValueError."""
        with pytest.raises(ValueError):
            build(["ok", ""])

    def test_keeps_duplicates(self) -> None:
        """When an item is repeated, every copy is kept."""
        assert build(["Fig", "Fig"]).all_items() == ["Fig", "Fig"]

    def test_accepts_generators(self) -> None:
        """When items come from a generator, they are consumed once and grouped."""
        assert build(name for name in ["b", "a"]).keys() == ["A", "B"]

    def test_non_letter_keys_sort_by_code_point(self) -> None:
        """When keys include digits and punctuation, they sort by folded code point."""
        assert build(["zebra", "42", "_x", "Apple"]).keys() == ["4", "_", "A", "Z"]

    def test_equivalent_spellings_share_a_section(self) -> None:
        """When one Hangul word is spelled precomposed and decomposed, both land in one section."""
        assert build(["\uac10", "\u1100\u1161\u11b7"]).keys() == ["\uac10"]

    def test_builtin_catalogue_sections(self) -> None:
        """When grouping the fruit catalogue, each letter gets its fruits in order."""
        index = build(FRUITS)
        assert index.to_dict() == {
            "A": ["Apple", "Apricot"],
            "B": ["Banana", "Blackberry", "Blueberry"],
            "C": ["Cherry", "Coconut", "Currant"],
            "F": ["Fig"],
            "K": ["Kiwi", "Kumquat"],
            "L": ["Lemon", "Lime"],
            "M": ["Mango"],
            "O": ["Orange"],
            "P": ["Peach", "Pear", "Pineapple"],
            "R": ["Raspberry"],
            "S": ["Strawberry"],
            "T": ["Tomato"],
            "W": ["Watermelon"],
        }

    def test_result_is_immutable(self) -> None:
        """When assigning to a built index, pydantic rejects the change."""
        index = build(["Apple"])
        with pytest.raises(ValidationError):
            index.sections = ()  # type: ignore[misc]


MIXED_ITEMS = [
    "banana",
    "Apple",
    "apple",
    "\u00c9clair",
    "e\u0301clair",
    "cherry",
    "Cherry",
    "42",
    "avocado",
    "Blueberry",
    "Apple",
    "\uac10",
    "\u1100\u1161\u11b7",
    "\U0001f1eb\U0001f1f7 France",
]

PROPERTY_INPUTS = {
    "mixed": MIXED_ITEMS,
    "single_item": ["Quince"],
    "one_key": ["pear", "Peach", "pineapple", "Plum", "papaya"],
    "case_duplicates": ["kiwi", "Kiwi", "KIWI", "kiwi", "Kumquat", "kumquat"],
    "catalogue": list(FRUITS),
}


def _shuffled(items: list[str], seed: int) -> list[str]:
    shuffled = list(items)
    random.Random(seed).shuffle(shuffled)
    return shuffled


@pytest.mark.parametrize("items", list(PROPERTY_INPUTS.values()), ids=list(PROPERTY_INPUTS))
class TestBuildProperties:
    """Structural guarantees of build across several inputs."""

    def test_every_item_appears_exactly_once(self, items: list[str]) -> None:
        """The union of all sections equals the input multiset."""
        assert sorted(build(items).all_items()) == sorted(items)

    def test_items_sit_under_their_own_key(self, items: list[str]) -> None:
        """Every item's group key equals the key of its section."""
        index = build(items)
        assert all(group_key(item) == s.key for s in index.sections for item in s.items)

    def test_no_empty_sections(self, items: list[str]) -> None:
        """Every section holds at least one item."""
        assert all(section.items for section in build(items).sections)

    def test_keys_strictly_increasing(self, items: list[str]) -> None:
        """Section keys are strictly increasing under the case-insensitive order."""
        keys = build(items).keys()
        assert all(sort_key(a) < sort_key(b) for a, b in zip(keys, keys[1:]))

    def test_sections_sorted_case_insensitively(self, items: list[str]) -> None:
        """Items inside each section are non-decreasing when case is ignored."""
        index = build(items)
        assert all(
            a.casefold() <= b.casefold()
            for section in index.sections
            for a, b in zip(section.items, section.items[1:])
        )

    def test_reversed_order_does_not_change_result(self, items: list[str]) -> None:
        """When the same items arrive in reverse order, the index is identical."""
        assert build(items) == build(list(reversed(items)))

    @pytest.mark.parametrize("seed", [0, 1, 7])
    def test_shuffled_order_does_not_change_result(self, items: list[str], seed: int) -> None:
        """When the same items arrive shuffled, the index is identical."""
        assert build(items) == build(_shuffled(items, seed))

    def test_concurrent_builds_agree(self, items: list[str]) -> None:
        """When built from several threads at once, every result is identical."""
        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(build, [items] * 8))
        assert all(result == results[0] for result in results)
