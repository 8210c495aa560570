"""
Extractive summarization service.

This module provides the ExtractiveSummarizer class that condenses a
transcript without any language model:
- the summary is the leading share of the transcript's sentences, verbatim
- key points are the most frequent meaningful words

The output is a pure function of the input text.
"""
import math
import re
from collections import Counter
from typing import List, Optional

from loguru import logger

from quickdigest.core.constants import SummaryConfig
from quickdigest.core.exceptions import TranscriptTooShortError
from quickdigest.models.youtube import SummaryResult

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
NON_WORD = re.compile(r"[^\w]", re.ASCII)


class ExtractiveSummarizer:
    """
    Naive extractive summarizer.

    Example:
        summarizer = ExtractiveSummarizer()
        result = summarizer.summarize("Long transcript...")
        result.summary, result.key_points, result.word_count
    """

    def __init__(
        self,
        sentence_ratio: float = SummaryConfig.SENTENCE_RATIO,
        max_sentences: int = SummaryConfig.MAX_SUMMARY_SENTENCES,
        key_point_count: int = SummaryConfig.KEY_POINT_COUNT,
        stop_words: Optional[frozenset[str]] = None,
    ):
        """
        Initialize the extractive summarizer.

        Args:
            sentence_ratio: Share of qualifying sentences kept in the summary.
            max_sentences: Upper bound on summary sentences.
            key_point_count: Number of keywords returned.
            stop_words: Words never reported as key points.
        """
        self.sentence_ratio = sentence_ratio
        self.max_sentences = max_sentences
        self.key_point_count = key_point_count
        self.stop_words = stop_words if stop_words is not None else SummaryConfig.STOP_WORDS

    @staticmethod
    def split_sentences(text: str) -> List[str]:
        """
        Split on runs of sentence-ending punctuation.

        Fragments whose trimmed length is not above
        ``SummaryConfig.MIN_SENTENCE_LENGTH`` are dropped; the others are
        returned exactly as split.
        """
        return [
            fragment
            for fragment in SENTENCE_BOUNDARY.split(text)
            if len(fragment.strip()) > SummaryConfig.MIN_SENTENCE_LENGTH
        ]

    def build_summary(self, text: str) -> str:
        sentences = self.split_sentences(text)
        count = min(self.max_sentences, math.ceil(len(sentences) * self.sentence_ratio))
        return ". ".join(sentences[:count]) + "."

    def extract_key_points(self, text: str) -> List[str]:
        """
        Return the most frequent meaningful words, highest count first.

        Tokens are lowercased and stripped of non-word characters. Tokens of
        ``SummaryConfig.MIN_KEYWORD_LENGTH`` characters or fewer and stop words
        are ignored. Ties keep first-seen order.
        """
        frequencies: Counter[str] = Counter()
        for word in text.lower().split():
            clean_word = NON_WORD.sub("", word)
            if len(clean_word) > SummaryConfig.MIN_KEYWORD_LENGTH and clean_word not in self.stop_words:
                frequencies[clean_word] += 1

        return [word for word, _ in frequencies.most_common(self.key_point_count)]

    @staticmethod
    def count_words(text: str) -> int:
        return len(text.split())

    def summarize(self, text: str) -> SummaryResult:
        """
        Summarize a transcript.

        Args:
            text: The transcript text.

        Returns:
            SummaryResult: Summary, up to five key points and the word count.

        Raises:
            TranscriptTooShortError: If the text is empty or shorter than
                ``SummaryConfig.MIN_TEXT_LENGTH`` characters.
        """
        if not text or len(text) < SummaryConfig.MIN_TEXT_LENGTH:
            raise TranscriptTooShortError()

        result = SummaryResult(
            summary=self.build_summary(text),
            key_points=self.extract_key_points(text),
            word_count=self.count_words(text),
        )
        logger.debug(
            f"Summarized {len(text)} chars → {len(result.summary)} chars, "
            f"{len(result.key_points)} key points"
        )
        return result
