# tests/test_elements.py
"""
ELEMENT STYLE TESTS: CPK Colors and Radii
"""

from molcraft.elements import DEFAULT_STYLE, element_style, text_color_for


def test_lookup_is_case_insensitive():
    assert element_style('cl') == element_style('Cl') == element_style('CL')
    assert element_style(' O ') == element_style('O')


def test_unknown_element_falls_back():
    assert element_style('Xe') == DEFAULT_STYLE


def test_hydrogen_is_smallest():
    radii = [element_style(s).radius for s in ('H', 'C', 'N', 'O', 'Cl')]
    assert min(radii) == element_style('H').radius


def test_text_color_contrast():
    assert text_color_for('#FFFFFF') == '#0f172a'
    assert text_color_for('#000000') == '#ffffff'
    assert text_color_for(element_style('O').color) == '#ffffff'
