"""
Tests for the item / loss report match score.
"""

from app.services.matching import MatchCandidate, compute_match_score


def test_title_words_and_location_overlap():
    """'blue' and 'backpack' overlap (+40) and the location appears (+20)."""
    candidate = MatchCandidate(
        item_title="Blue Backpack",
        item_location="Central Park",
        report_description="I lost my blue backpack near central park yesterday",
    )
    assert compute_match_score(candidate) == 60


def test_no_overlap_is_raised_to_floor():
    candidate = MatchCandidate(
        item_title="Key",
        item_location="Library",
        report_description="unrelated text",
    )
    assert compute_match_score(candidate) == 20


def test_short_words_are_ignored():
    candidate = MatchCandidate(
        item_title="Red Hat Bag",
        item_location="Gym",
        report_description="red hat bag",
    )
    assert compute_match_score(candidate) == 20


def test_four_letter_word_counts():
    candidate = MatchCandidate(
        item_title="Gold Ring",
        item_location="Mall",
        report_description="a gold ring with an engraving",
    )
    assert compute_match_score(candidate) == 40


def test_score_is_capped_at_100():
    candidate = MatchCandidate(
        item_title="Black Leather Wallet Containing Student Identity Cards",
        item_location="Station",
        report_description=(
            "black leather wallet containing student identity cards, lost at the station"
        ),
    )
    assert compute_match_score(candidate) == 100


def test_empty_location_gives_no_bonus():
    candidate = MatchCandidate(
        item_title="Umbrella",
        item_location="",
        report_description="umbrella",
    )
    assert compute_match_score(candidate) == 20


def test_location_only_match():
    candidate = MatchCandidate(
        item_title="Phone",
        item_location="Kariakoo Market",
        report_description="Dropped something at KARIAKOO MARKET",
    )
    assert compute_match_score(candidate) == 20


def test_substring_matching_is_case_insensitive():
    candidate = MatchCandidate(
        item_title="LAPTOP Charger",
        item_location="Library",
        report_description="my laptop charger went missing in the library",
    )
    assert compute_match_score(candidate) == 60


def test_score_always_within_bounds_and_repeatable():
    titles = ["", "a b c", "Silver Watch", "Keys Wallet Phone Laptop Camera Bottle"]
    descriptions = ["", "silver watch", "keys wallet phone laptop camera bottle at the mall"]

    for title in titles:
        for description in descriptions:
            candidate = MatchCandidate(title, "mall", description)
            score = compute_match_score(candidate)
            assert 20 <= score <= 100
            assert compute_match_score(candidate) == score
