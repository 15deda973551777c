from app.modules.recommendations.domain.data.care_guides import CARE_GUIDES
from app.modules.recommendations.domain.services.care_guide_service import (
    BROWN_TIPS_ADVICE,
    DARK_SPOTS_ADVICE,
    LEGGY_ADVICE,
    NO_MATCH_DESCRIPTION_ADVICE,
    PEST_ADVICE,
    WHITE_SPOTS_ADVICE,
    YELLOW_LEAVES_ADVICE,
    basic_care_instructions,
    build_title,
    description_advice,
    find_care_guide_key,
    generate_care_recommendation,
    issue_advice,
)


def test_find_care_guide_key_matches_name_then_species():
    assert find_care_guide_key("My Monstera") == "monstera"
    assert find_care_guide_key("Kevin", "Epipremnum aureum") is None
    assert find_care_guide_key("Kevin", "Golden Pothos") == "pothos"
    assert find_care_guide_key("Kevin") is None


def test_find_care_guide_key_uses_guide_order():
    # "succulent" is listed before "cactus"
    assert find_care_guide_key("Cactus and succulent bowl") == "succulent"


def test_name_mentioning_default_selects_general_guide():
    assert find_care_guide_key("my default fern") is None

    guide = generate_care_recommendation("my default fern")
    assert guide.tags == CARE_GUIDES["default"]["tags"]


def test_matched_guide_is_personalized_with_plant_name():
    guide = generate_care_recommendation("Golden Pothos")

    assert guide.content.startswith("\n# Golden Pothos (Epipremnum aureum) Care Guide")
    assert guide.tags == CARE_GUIDES["pothos"]["tags"]
    assert guide.content.endswith("slightly based on your home environment.")
    assert "tailored for your Golden Pothos." in guide.content


def test_unknown_plant_gets_general_guide_with_single_heading():
    guide = generate_care_recommendation("Mystery plant", "Plantus mysterius")

    assert guide.content.startswith("# Care Guide for Mystery plant (Plantus mysterius)\n")
    assert "General Plant Care Guide" not in guide.content
    assert "## Watering" in guide.content
    assert guide.tags == CARE_GUIDES["default"]["tags"]


def test_issue_section_is_appended():
    guide = generate_care_recommendation("Monstera", care_issue="yellow leaves everywhere")

    assert "## Specific Issue: yellow leaves everywhere" in guide.content
    assert YELLOW_LEAVES_ADVICE in guide.content


def test_description_section_is_appended():
    guide = generate_care_recommendation("Fern", plant_description="Lives in my bathroom")

    assert "## Based on Your Description" in guide.content
    assert 'You mentioned: "Lives in my bathroom"' in guide.content


def test_issue_advice_rules():
    assert issue_advice("Yellow leaf at the bottom") == YELLOW_LEAVES_ADVICE
    assert issue_advice("brown tips") == BROWN_TIPS_ADVICE
    assert issue_advice("black spots on leaves") == DARK_SPOTS_ADVICE
    assert issue_advice("white powder spots") == WHITE_SPOTS_ADVICE
    assert issue_advice("very leggy") == LEGGY_ADVICE
    assert issue_advice("tiny bugs in soil") == PEST_ADVICE


def test_spots_without_colour_fall_through_to_later_rules():
    assert issue_advice("spots and bugs") == PEST_ADVICE


def test_unmatched_issue_mentions_the_issue():
    advice = issue_advice("It hums at night")
    assert 'regarding "It hums at night"' in advice


def test_description_advice_accumulates():
    advice = description_advice("South window, I forget to water, and the cat chews leaves")

    assert "south or west-facing" in advice
    assert "forget" in advice.lower()
    assert "pets" in advice


def test_description_advice_without_keywords():
    assert description_advice("It is green") == NO_MATCH_DESCRIPTION_ADVICE


def test_build_title():
    assert build_title("Monstera") == "Care tips for your Monstera"
    assert build_title("Monstera", "yellow leaves") == "Monstera: Yellow leaves"


def test_basic_care_instructions_keeps_first_two_sections():
    instructions = basic_care_instructions("Golden Pothos")

    assert "## Watering" in instructions
    assert "## Light" in instructions
    assert instructions.count("##") == 2
    assert "## Soil & Fertilizing" not in instructions


def test_basic_care_instructions_for_unknown_plant():
    instructions = basic_care_instructions("Mystery plant")
    assert "# Care Guide for Mystery plant" in instructions
