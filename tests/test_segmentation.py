"""Unit tests for segmentation module."""
import pytest

from org_person_extractor.segmentation import segment, split_sentences, tokenize


class TestSplitSentences:
    """Tests for sentence splitting."""

    def test_terminal_punctuation(self):
        assert split_sentences("First one. Second one! Third?") == ["First one", "Second one", "Third"]

    def test_consecutive_marks(self):
        assert split_sentences("Wait... What?! Fine.") == ["Wait", "What", "Fine"]

    def test_abbreviation_keeps_period(self):
        text = "Dr. Watson arrived. He sat."
        assert split_sentences(text, ["dr."]) == ["Dr. Watson arrived", "He sat"]

    def test_unknown_abbreviation_splits(self):
        assert split_sentences("Dr. Watson arrived.") == ["Dr", "Watson arrived"]

    def test_initials_keep_period(self):
        assert split_sentences("A. B. Test report.") == ["A. B. Test report"]

    def test_dotted_initialism(self):
        assert split_sentences("The U.S. economy grew. Prices fell.") == [
            "The U.S. economy grew",
            "Prices fell",
        ]

    def test_period_inside_word(self):
        assert split_sentences("Pi is 3.14 roughly.") == ["Pi is 3.14 roughly"]

    def test_initial_at_end_of_text(self):
        assert split_sentences("We chose plan B.") == ["We chose plan B"]

    def test_one_letter_word_before_next_sentence(self):
        assert split_sentences("We chose plan B. Then we left.") == ["We chose plan B", "Then we left"]
        assert split_sentences("Я выбрал план Б. Иван ушёл.") == ["Я выбрал план Б", "Иван ушёл"]

    def test_initial_after_capitalized_name(self):
        assert split_sentences("John A. Smith left.") == ["John A. Smith left"]
        assert split_sentences("Иванов И. И. пришёл.") == ["Иванов И. И. пришёл"]

    def test_initial_after_title(self):
        assert split_sentences("Пришёл г-н И. Иванов.", titles=["г-н"]) == ["Пришёл г-н И. Иванов"]
        assert split_sentences("Пришёл г-н И. Иванов.") == ["Пришёл г-н И", "Иванов"]

    def test_no_terminal_punctuation(self):
        assert split_sentences("no punctuation here") == ["no punctuation here"]

    def test_russian_abbreviation(self):
        text = "Встреча с проф. Сидоровым прошла. Все довольны."
        assert split_sentences(text, ["проф."]) == ["Встреча с проф. Сидоровым прошла", "Все довольны"]

    @pytest.mark.parametrize("text", ["", "   ", "...", "?!"])
    def test_empty(self, text):
        assert split_sentences(text) == []


class TestTokenize:
    """Tests for word tokenization."""

    def test_drops_punctuation(self):
        assert tokenize("Hello, world") == ["Hello", "world"]

    def test_hyphenated_title(self):
        assert tokenize("г-н Иванов") == ["г-н", "Иванов"]

    def test_keeps_trailing_period(self):
        assert tokenize("A. B. Test") == ["A.", "B.", "Test"]

    def test_apostrophes(self):
        assert tokenize("O'Neil and McDonald’s") == ["O'Neil", "and", "McDonald’s"]

    def test_quotes(self):
        assert tokenize("ООО «Ромашка»") == ["ООО", "Ромашка"]

    def test_dotted_abbreviation(self):
        assert tokenize("U.S. economy") == ["U.S.", "economy"]

    def test_digits(self):
        assert tokenize("in 2024") == ["in", "2024"]

    def test_preserves_case(self):
        assert tokenize("ACME Corp") == ["ACME", "Corp"]

    def test_empty(self):
        assert tokenize("") == []


class TestSegment:
    """Tests for sentence + token segmentation."""

    def test_sentences_of_tokens(self):
        assert segment("Hello world. Bye!") == [["Hello", "world"], ["Bye"]]

    def test_drops_sentences_without_tokens(self):
        assert segment("Hi. — . Bye.") == [["Hi"], ["Bye"]]

    def test_abbreviations_passed_through(self):
        assert segment("Dr. Watson left.", ["dr."]) == [["Dr.", "Watson", "left"]]

    def test_empty(self):
        assert segment("") == []
