"""
Unit tests for Layer 2: Theme Extraction & Phrase Extraction
Tests theme config, keyword classifier, sentence splitting and phrase patterns
"""
import sys
import os
import re

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from layer_2_theme_extraction.theme_config import (
    Theme,
    THEMES,
    THEME_PATTERNS,
    get_theme_list,
    get_theme_description,
    is_valid_theme,
    get_fallback_theme,
)
from layer_2_theme_extraction.classifier import ThemeClassifier, classify_themes
from layer_2_theme_extraction.phrase_extractor import (
    ExtractionPattern,
    PhraseExtractor,
    CONCERN_PATTERNS,
    ACTION_PATTERNS,
    MAX_CONCERN_LENGTH,
    MAX_ACTION_LENGTH,
    split_sentences,
    extract_concerns,
    extract_actions,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class TestThemeConfig:
    """Test theme configuration"""

    def test_get_theme_list(self):
        """Test the taxonomy is closed and ordered"""
        themes = get_theme_list()
        assert len(themes) == 11
        assert themes[0] == Theme.WORK
        assert themes[-1] == Theme.PERSONAL_GROWTH
        assert Theme.TIME_MANAGEMENT in themes

    def test_theme_values(self):
        """Test wire values use hyphens"""
        assert Theme.TIME_MANAGEMENT.value == "time-management"
        assert Theme.CREATIVE_PROJECTS.value == "creative-projects"
        assert Theme.PERSONAL_GROWTH.value == "personal-growth"

    def test_get_theme_description(self):
        """Test descriptions by value"""
        assert "deadline" in get_theme_description("work")
        assert get_theme_description(Theme.HEALTH) != ""
        assert get_theme_description("Non-existent Theme") == ""

    def test_is_valid_theme(self):
        """Test theme validation"""
        assert is_valid_theme("work") is True
        assert is_valid_theme("time-management") is True
        assert is_valid_theme("time management") is False
        assert is_valid_theme("") is False

    def test_fallback_theme(self):
        """Test fallback theme is personal growth"""
        assert get_fallback_theme() == Theme.PERSONAL_GROWTH

    def test_every_theme_but_fallback_has_pattern(self):
        """Test pattern table covers all non-fallback themes in order"""
        pattern_themes = [theme for _, theme in THEME_PATTERNS]
        assert pattern_themes == [theme for theme in THEMES if theme != Theme.PERSONAL_GROWTH]


class TestThemeClassifier:
    """Test keyword theme classification"""

    def test_single_theme(self):
        """Test a work sentence maps to work"""
        assert classify_themes("I'm worried about my job.") == [Theme.WORK]

    def test_multiple_themes_in_table_order(self):
        """Test several themes come back in table order"""
        themes = classify_themes("My sleep is bad and the money is tight because of my boss.")
        assert themes == [Theme.WORK, Theme.FINANCES, Theme.HEALTH]

    def test_shared_keyword(self):
        """Test a keyword listed under two themes tags both"""
        assert classify_themes("This project is eating me alive") == [Theme.WORK, Theme.CREATIVE_PROJECTS]

    def test_no_duplicates(self):
        """Test a theme is added once however often it matches"""
        assert classify_themes("work work job career boss") == [Theme.WORK]

    def test_case_insensitive(self):
        """Test matching ignores case"""
        assert classify_themes("MONEY MONEY MONEY") == [Theme.FINANCES]

    def test_word_boundaries(self):
        """Test keywords don't match inside other words"""
        assert classify_themes("I fixed the network cable") == [Theme.PERSONAL_GROWTH]

    def test_keyword_stems(self):
        """Test stem keywords match their word forms"""
        assert classify_themes("I've been so lonely") == [Theme.SOCIAL]
        assert classify_themes("Feeling isolated") == [Theme.SOCIAL]

    def test_multi_word_keywords(self):
        """Test phrases like 'should i' match"""
        assert Theme.DECISIONS in classify_themes("Should I stay or go")
        assert Theme.TIME_MANAGEMENT in classify_themes("There is too much going on")

    def test_fallback_when_nothing_matches(self):
        """Test empty and unmatched text fall back to personal growth"""
        assert classify_themes("") == [Theme.PERSONAL_GROWTH]
        assert classify_themes("The sky looks grey") == [Theme.PERSONAL_GROWTH]

    def test_custom_table(self):
        """Test a classifier with its own table"""
        classifier = ThemeClassifier(
            patterns=[(re.compile(r"\bguitar\b", re.IGNORECASE), Theme.CREATIVE_PROJECTS)],
        )
        assert classifier.classify("guitar practice") == [Theme.CREATIVE_PROJECTS]
        assert classifier.classify("my job") == [Theme.PERSONAL_GROWTH]


class TestSentenceSplitting:
    """Test sentence splitting for extraction"""

    def test_split(self):
        """Test sentences split on terminators and keep their spacing"""
        sentences = split_sentences("I'm worried about my job. I should talk to my manager.")
        assert sentences == ["I'm worried about my job", " I should talk to my manager"]

    def test_short_segments_dropped(self):
        """Test fragments of 5 chars or fewer are dropped"""
        assert split_sentences("Ok. Fine!! Yes? This one stays.") == [" This one stays"]

    def test_empty(self):
        """Test empty text has no sentences"""
        assert split_sentences("") == []


class TestPhraseExtractor:
    """Test concern and action extraction"""

    def test_pattern_lengths(self):
        """Test pattern tables carry their max lengths"""
        assert len(CONCERN_PATTERNS) == 5
        assert len(ACTION_PATTERNS) == 3
        assert all(p.max_length == MAX_CONCERN_LENGTH == 60 for p in CONCERN_PATTERNS)
        assert all(p.max_length == MAX_ACTION_LENGTH == 50 for p in ACTION_PATTERNS)

    def test_worried_about(self):
        """Test 'I'm worried about X' captures X"""
        assert extract_concerns(["I'm worried about my job"]) == ["my job"]

    def test_curly_apostrophe(self):
        """Test typographic apostrophes work too"""
        assert extract_concerns(["I’m scared that nobody reads it"]) == ["nobody reads it"]

    def test_dont_know(self):
        """Test 'I don't know X' captures X"""
        assert extract_concerns(["I don't know where this is going"]) == ["where this is going"]

    def test_i_feel(self):
        """Test 'I feel like X' captures X"""
        assert extract_concerns(["I feel like nothing works"]) == ["nothing works"]

    def test_short_capture_discarded(self):
        """Test captures of 5 chars or fewer are dropped silently"""
        assert extract_concerns(["I feel tired"]) == []

    def test_multiple_patterns_per_sentence(self):
        """Test one sentence can yield a phrase per matching pattern"""
        concerns = extract_concerns(["What if I keep failing at everything"])
        assert concerns == ["I keep failing at everything", "failing at everything"]

    def test_truncation(self):
        """Test concerns are cut to 60 chars and actions to 50"""
        concerns = extract_concerns(["I keep " + "x" * 100])
        assert concerns == ["x" * 60]
        actions = extract_actions(["I should " + "y" * 100])
        assert actions == ["y" * 50]

    def test_actions(self):
        """Test intention phrasing"""
        assert extract_actions([" I should talk to my manager"]) == ["talk to my manager"]
        assert extract_actions(["I was thinking about a career change"]) == ["about a career change"]

    def test_maybe_i_could(self):
        """Test 'maybe I could' also matches the generic pattern"""
        assert extract_actions(["Maybe I could ask for help"]) == ["ask for help", "ask for help"]

    def test_word_boundary_on_i(self):
        """Test 'i' inside a word is not a first-person pronoun"""
        assert extract_actions(["Hawaii should be lovely this year"]) == []

    def test_order_is_sentence_then_pattern(self):
        """Test extraction order"""
        sentences = ["I feel like giving up", "I'm stuck because of the visa"]
        assert extract_concerns(sentences) == ["giving up", "of the visa"]

    def test_no_matches(self):
        """Test sentences without triggers give nothing"""
        assert extract_concerns(["The weather was nice today"]) == []
        assert extract_actions([]) == []

    def test_custom_extractor(self):
        """Test a custom pattern table"""
        pattern = ExtractionPattern("hope", re.compile(r"\bi hope\s+(.+)", re.IGNORECASE), 20)
        extractor = PhraseExtractor([pattern])
        assert extractor.extract(["I hope tomorrow is calmer than today"]) == ["tomorrow is calmer t"]


def run_all_tests():
    """Run all test suites"""
    print("=" * 80)
    print("Layer 2 Theme Extraction - Test Suite")
    print("=" * 80)

    test_classes = [
        ("Theme Config", TestThemeConfig),
        ("Theme Classifier", TestThemeClassifier),
        ("Sentence Splitting", TestSentenceSplitting),
        ("Phrase Extractor", TestPhraseExtractor),
    ]

    total_tests = 0
    failed_tests = []

    for suite_name, test_class in test_classes:
        print(f"\nRunning {suite_name} Tests")
        test_instance = test_class()
        for test_method in [method for method in dir(test_instance) if method.startswith('test_')]:
            total_tests += 1
            try:
                getattr(test_instance, test_method)()
                print(f"  ✅ {test_method}")
            except Exception as e:
                print(f"  ❌ {test_method}: {e}")
                failed_tests.append((suite_name, test_method, str(e)))

    print(f"\nTotal tests: {total_tests}, Failed: {len(failed_tests)}")
    return 1 if failed_tests else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
