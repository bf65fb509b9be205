"""Tests for the DOM translation coverage scanner."""

import logging

import pytest

from dom_utils import parse_html
from translation_scanner import (
    get_element_xpath,
    has_translation_key,
    is_meaningful_text,
    log_missing_keys,
    scan_translation_coverage,
    should_exclude_node,
)


def scan(markup):
    return scan_translation_coverage(document=parse_html(markup))


class TestMeaningfulText:
    @pytest.mark.parametrize("text", ["Hello", "OK", "Բարև ձեզ", "Привет", "Café", "  Save changes  "])
    def test_letters_are_meaningful(self, text):
        assert is_meaningful_text(text)

    @pytest.mark.parametrize("text", ["", "   ", "42", "3.14, 2.71", "1 000", "+-", "©", "™®", "★★", "A", "!?"])
    def test_numbers_symbols_and_single_letters_are_not(self, text):
        assert not is_meaningful_text(text)


class TestScanCoverage:
    def test_seven_of_ten_tagged_gives_seventy_percent(self):
        tagged = "".join(f'<p data-i18n-key="k.{i}">Tagged text {i}</p>' for i in range(7))
        untagged = "<p>Untagged one</p><div>Untagged two</div><span>Untagged three</span>"
        result = scan(f"<html><body>{tagged}{untagged}</body></html>")

        assert result.total_text_nodes == 10
        assert result.translated_nodes == 7
        assert result.coverage_percentage == 70
        assert len(result.missing_keys) == 3
        assert [m.text for m in result.missing_keys] == ["Untagged one", "Untagged two", "Untagged three"]

    def test_no_meaningful_text_is_full_coverage(self):
        result = scan("<html><body><span>123</span><p>   </p><div>©</div></body></html>")
        assert result.total_text_nodes == 0
        assert result.coverage_percentage == 100
        assert result.missing_keys == []

    def test_empty_document(self):
        assert scan("").coverage_percentage == 100

    def test_key_found_within_three_levels(self):
        result = scan('<body><div data-i18n-key="a"><p><span>Within reach</span></p></div></body>')
        assert result.translated_nodes == 1
        assert result.missing_keys == []

    def test_key_beyond_three_levels_is_missing(self):
        result = scan('<body><div data-i18n-key="a"><p><span><b>Too deep</b></span></p></div></body>')
        assert result.translated_nodes == 0
        assert result.missing_keys[0].text == "Too deep"
        assert result.missing_keys[0].parent_tag == "B"

    def test_hidden_elements_are_excluded(self):
        markup = """
        <body>
          <div style="display: none"><p>Hidden block</p></div>
          <span style="display:none">Hidden span</span>
          <span style="visibility: hidden">Invisible</span>
          <span style="opacity: 0">Transparent</span>
          <span hidden>Hidden attribute</span>
          <span aria-hidden="true">Decorative</span>
          <p>Visible text</p>
        </body>
        """
        result = scan(markup)
        assert result.total_text_nodes == 1
        assert [m.text for m in result.missing_keys] == ["Visible text"]

    def test_visibility_can_be_overridden_by_child(self):
        markup = '<body><div style="visibility: hidden"><span style="visibility: visible">Shown again</span></div></body>'
        assert scan(markup).total_text_nodes == 1

    def test_scripts_styles_svg_testids_and_icons_are_excluded(self):
        markup = """
        <body>
          <script>var greeting = "Hello there";</script>
          <style>.title { content: "Styled text"; }</style>
          <svg><text>Chart label</text></svg>
          <span data-testid="price">Price label</span>
          <i class="lucide-heart">Heart icon</i>
          <span class="emoji-wrap">Party emoji</span>
        </body>
        """
        result = scan(markup)
        assert result.total_text_nodes == 0
        assert result.coverage_percentage == 100

    def test_defaults_to_body(self):
        document = parse_html('<html><head><title>Page title</title></head><body><p>Body text</p></body></html>')
        result = scan_translation_coverage(document=document)
        assert result.total_text_nodes == 1

    def test_scan_subtree(self):
        document = parse_html('<body><section id="a"><p>First</p></section><section><p>Second</p></section></body>')
        result = scan_translation_coverage(root=document.find(id="a"))
        assert [m.text for m in result.missing_keys] == ["First"]

    def test_requires_root_or_document(self):
        with pytest.raises(ValueError):
            scan_translation_coverage()

    def test_scan_does_not_modify_document(self):
        markup = '<body><p class="lead">Untagged</p><p data-i18n-key="x">Tagged</p></body>'
        document = parse_html(markup)
        before = str(document)
        scan_translation_coverage(document=document)
        assert str(document) == before

    def test_coverage_rounds_half_up(self):
        # 1/8 = 12.5%
        tagged = '<p data-i18n-key="k">Tagged text</p>'
        untagged = "".join(f"<p>Plain text {i}</p>" for i in range(7))
        assert scan(f"<body>{tagged}{untagged}</body>").coverage_percentage == 13


class TestHelpers:
    def test_xpath_uses_id(self):
        document = parse_html('<body><p id="intro">Hi there</p></body>')
        assert get_element_xpath(document.find("p")) == '//*[@id="intro"]'

    def test_xpath_positional(self):
        document = parse_html("<html><body><div><p>One</p></div><div><p>Two</p><p>Three</p></div></body></html>")
        paragraphs = document.find_all("p")
        assert get_element_xpath(paragraphs[0]) == "/html/body/div/p"
        assert get_element_xpath(paragraphs[2]) == "/html/body/div[2]/p[2]"

    def test_has_translation_key_checks_element_itself(self):
        document = parse_html('<span data-i18n-key="a">Text</span>')
        assert has_translation_key(document.find("span"))

    def test_text_without_parent_element_is_excluded(self):
        document = parse_html("Loose text")
        assert should_exclude_node(document.contents[0])

    def test_missing_key_records_class_name(self):
        result = scan('<body><p class="lead big">Untagged lead</p></body>')
        assert result.missing_keys[0].class_name == "lead big"

    def test_to_dict_omits_elements(self):
        data = scan('<body><p>Untagged</p></body>').to_dict()
        assert data["coveragePercentage"] == 0
        assert data["missingKeys"] == [
            {"text": "Untagged", "xpath": "/body/p", "parentTag": "P", "className": ""}
        ]

    def test_log_missing_keys(self, caplog):
        caplog.set_level(logging.INFO, logger="translation_scanner")
        log_missing_keys(scan('<body><p>Untagged</p></body>'))
        assert "Translation Coverage: 0%" in caplog.text
        assert '"Untagged"' in caplog.text

        caplog.clear()
        log_missing_keys(scan('<body></body>'))
        assert "Translation Coverage: 100%" in caplog.text
