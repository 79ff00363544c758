import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from release_tokens import (
    DEFAULT_QUALITY,
    episode_key,
    extract_episode_id,
    extract_quality,
    quality_or_default,
)

def test_extract_episode_id_takes_first_match() -> None:
    assert extract_episode_id("Show S03E11 720p") == "S03E11"
    assert extract_episode_id("Show S01E01 S01E02") == "S01E01"
    assert extract_episode_id("Show 2x05") == ""

def test_extract_episode_id_is_case_sensitive() -> None:
    assert extract_episode_id("show s01e01") == ""
    assert extract_episode_id("Show S1E1") == ""

def test_extract_quality_matches_three_or_four_digits() -> None:
    assert extract_quality("Show S01E01 1080p WEB") == "1080p"
    assert extract_quality("Show S01E01 720p") == "720p"
    assert extract_quality("Show S01E01 HDTV x264") == ""
    assert extract_quality("Show S01E01 720P") == ""

def test_quality_or_default_falls_back_to_hdtv() -> None:
    assert quality_or_default("Show S01E01 HDTV") == DEFAULT_QUALITY == "hdtv"
    assert quality_or_default("Show S01E01 480p") == "480p"

def test_episode_key_of_label_without_tokens() -> None:
    assert episode_key("") == ("", "hdtv")
    assert episode_key("Show Name S02E05 1080p") == ("S02E05", "1080p")
