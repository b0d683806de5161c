"""Tests for video title cleanup."""

import pytest

from deycook.utils.titles import clean_video_title, usable_video_title

TITLES = [
    "BEST Creamy Tomato Pasta (Easy!) - Official Video #shorts",
    "How to Make Authentic Shakshuka | Full Tutorial",
    "The ULTIMATE homemade pizza dough [4K] @chefjohn",
    "quick_and_simple fried rice... recipe video",
    "Pasta Tutorial Video",
    "Official Video",
    "Lemon Garlic Chicken",
    "how to easy cook risotto",
    "ﬁsh tacos",
    "ßauce noodles",
    "",
]


def test_promotional_clutter_is_removed():
    assert clean_video_title("BEST Creamy Tomato Pasta (Easy!) - Official Video #shorts") == "Creamy Tomato Pasta"


def test_how_to_and_brackets_are_removed():
    assert clean_video_title("The ULTIMATE homemade pizza dough [4K] @chefjohn") == "The Pizza Dough"


def test_separators_become_spaces_and_words_are_title_cased():
    assert clean_video_title("lemon_garlic-chicken") == "Lemon Garlic Chicken"


def test_trailing_generic_suffix_is_stripped():
    assert clean_video_title("Pasta Tutorial Video") == "Pasta"


def test_empty_result_keeps_raw_title():
    assert clean_video_title("Official Video") == "Official Video"
    assert clean_video_title("Easy Recipe") == "Easy Recipe"


@pytest.mark.parametrize("title", TITLES)
def test_cleaning_is_idempotent(title):
    once = clean_video_title(title)
    assert clean_video_title(once) == once


def test_long_titles_are_not_usable():
    long_title = " ".join(["Saffron"] * 12)
    assert len(clean_video_title(long_title)) > 70
    assert usable_video_title(long_title) == ""
    assert usable_video_title("Creamy Tomato Pasta - Easy Recipe") == "Creamy Tomato Pasta"


def test_characters_that_expand_when_upper_cased():
    assert clean_video_title("ﬁsh tacos") == "Fish Tacos"
    assert clean_video_title("Fish Tacos") == "Fish Tacos"
