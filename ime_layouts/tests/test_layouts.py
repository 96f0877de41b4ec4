import pytest
from ime_layouts.constants import ALPHABET_SHIFTED_ELEMENTS, ElementId
from ime_layouts.expected.common import DELETE_KEY, SHIFT_KEY, SHIFTED_SHIFT_KEY, SPACEBAR
from ime_layouts.layout.layout_base import LayoutBase
from ime_layouts.registry import get_layout_for_locale


def count(layout, k) -> int:
    return sum(row.count(k) for row in layout)


class TestAllLayouts:
    def test_spacebar_row(self, layout: LayoutBase, is_phone: bool) -> None:
        alphabet = layout.get_layout(is_phone, ElementId.ALPHABET)
        assert alphabet is not None
        assert len(alphabet) == 4
        assert SPACEBAR in alphabet[3]

    @pytest.mark.parametrize("element_id", list(ElementId))
    def test_layouts_are_repeatable(self, layout: LayoutBase, is_phone: bool, element_id: ElementId) -> None:
        assert layout.get_layout(is_phone, element_id) == layout.get_layout(is_phone, element_id)

    def test_shift_is_replaced_everywhere(self, layout: LayoutBase, is_phone: bool) -> None:
        alphabet = layout.get_layout(is_phone, ElementId.ALPHABET)
        for element_id in ALPHABET_SHIFTED_ELEMENTS:
            shifted = layout.get_layout(is_phone, element_id)
            if shifted is None:
                continue
            assert count(shifted, SHIFT_KEY) == 0
            assert count(shifted, SHIFTED_SHIFT_KEY) == count(alphabet, SHIFT_KEY)

    def test_accents_do_not_change_shape(self, layout: LayoutBase, is_phone: bool) -> None:
        common = layout.get_common_alphabet_layout(is_phone)
        shifted = layout.get_common_alphabet_shift_layout(is_phone, ElementId.ALPHABET_MANUAL_SHIFTED)
        if shifted is None:
            pytest.skip(f"{layout.name} has no shifted layout")
        assert [len(row) for row in shifted] == [len(row) for row in common]

    def test_symbols_are_raw_tables(self, layout: LayoutBase, is_phone: bool) -> None:
        assert layout.get_layout(is_phone, ElementId.SYMBOLS) == layout.symbols.get_layout(is_phone)
        assert layout.get_layout(is_phone, ElementId.SYMBOLS_SHIFTED) == layout.symbols_shifted.get_layout(is_phone)

    def test_delete_key_position(self, layout: LayoutBase, is_phone: bool) -> None:
        alphabet = layout.get_layout(is_phone, ElementId.ALPHABET)
        assert alphabet is not None
        if is_phone:
            assert alphabet[2][-1] == DELETE_KEY
        else:
            assert DELETE_KEY not in alphabet[2]
            assert alphabet[0][-1] == DELETE_KEY


class TestLocales:
    def test_english_letters(self) -> None:
        alphabet = get_layout_for_locale("en_US").get_layout(True, ElementId.ALPHABET)
        assert alphabet is not None
        assert "".join(k.label for k in alphabet[0]) == "qwertyuiop"
        assert [k.label for k in alphabet[0][2].more_keys] == ["3", "é", "è", "ê", "ë", "ē"]

    def test_german_uses_euro(self) -> None:
        symbols = get_layout_for_locale("de_DE").get_layout(True, ElementId.SYMBOLS)
        assert symbols is not None
        assert symbols[1][2].label == "€"

    def test_german_umlauts(self) -> None:
        common = get_layout_for_locale("de_DE").get_common_alphabet_layout(True)
        assert [k.label for k in common[1][-2:]] == ["ö", "ä"]
        assert common[0][-1].label == "ü"

    def test_french_azerty(self) -> None:
        common = get_layout_for_locale("fr_FR").get_common_alphabet_layout(False)
        assert "".join(k.label for k in common[0]) == "azertyuiop"

    def test_spanish_enye(self) -> None:
        layout = get_layout_for_locale("es_ES")
        assert layout.get_common_alphabet_layout(True)[1][-1].label == "ñ"
        shifted = layout.get_layout(True, ElementId.ALPHABET_MANUAL_SHIFTED)
        assert shifted is not None
        assert shifted[1][-1].label == "Ñ"

    def test_turkish_dotted_capital_i(self) -> None:
        shifted = get_layout_for_locale("tr_TR").get_layout(True, ElementId.ALPHABET_AUTOMATIC_SHIFTED)
        assert shifted is not None
        i = shifted[0][7]
        assert i.label == "İ"
        assert [k.label for k in i.more_keys[:3]] == ["8", "I", "Î"]

    def test_turkish_lira(self) -> None:
        symbols = get_layout_for_locale("tr_TR").get_layout(False, ElementId.SYMBOLS)
        assert symbols is not None
        assert symbols[1][2].label == "₺"

    @pytest.mark.parametrize("element_id", sorted(ALPHABET_SHIFTED_ELEMENTS))
    def test_hebrew_has_no_shifted_layout(self, element_id: ElementId) -> None:
        assert get_layout_for_locale("iw_IL").get_layout(True, element_id) is None

    def test_hebrew_has_no_shift_key(self) -> None:
        alphabet = get_layout_for_locale("iw_IL").get_layout(False, ElementId.ALPHABET)
        assert alphabet is not None
        assert count(alphabet, SHIFT_KEY) == 0

    def test_hebrew_symbols_are_mirrored(self) -> None:
        symbols = get_layout_for_locale("iw_IL").get_layout(True, ElementId.SYMBOLS)
        assert symbols is not None
        assert symbols[1][2].label == "₪"
        assert symbols[1][7].output == ")"
